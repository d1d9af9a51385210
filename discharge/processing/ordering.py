"""Ordering and projection of extracted discharge records."""

from __future__ import annotations

import logging

from discharge.core.models import BriefRecord, DischargeRecord

LOGGER = logging.getLogger("discharge.processing.ordering")

LEGACY_SORTING_WARNING = (
    "Legacy sorting keeps the export order; records may not follow a usable "
    "walking order within a location."
)


def _sort_value(value: str | None) -> tuple[bool, str]:
    # None sorts before every string, the empty string included.
    return (value is not None, value or "")


def sort_key(record: DischargeRecord) -> tuple[tuple[bool, str], ...]:
    """Canonical key: location, header, author, description."""
    return (
        _sort_value(record.location),
        _sort_value(record.header),
        _sort_value(record.author),
        _sort_value(record.description),
    )


def sort_records(records: list[DischargeRecord]) -> list[DischargeRecord]:
    """Return records in canonical order. Ties keep their emission order."""
    return sorted(records, key=sort_key)


def order_records(
    records: list[DischargeRecord],
    legacy_sorting: bool = False,
) -> tuple[list[DischargeRecord], list[str]]:
    """Apply canonical or legacy ordering.

    Args:
        records: Records in emission order
        legacy_sorting: Keep emission order instead of sorting

    Returns:
        Tuple of (ordered records, warnings raised while ordering)
    """
    if legacy_sorting:
        LOGGER.warning(LEGACY_SORTING_WARNING)
        return list(records), [LEGACY_SORTING_WARNING]
    return sort_records(records), []


def project_records(records: list[DischargeRecord]) -> list[BriefRecord]:
    """Project records onto header, author, location and description."""
    return [record.brief() for record in records]
