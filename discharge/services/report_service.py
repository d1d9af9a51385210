"""Report service tying the reader, extractor and post-processor together."""

from __future__ import annotations

import logging
from pathlib import Path

from discharge.core.config import DischargeConfig
from discharge.core.models import ReportMode, ReportResult, ReportStatus
from discharge.extractors.discharge_extractor import DischargeExtractor, count_characters
from discharge.processing.ordering import order_records, project_records
from discharge.source.reader import read_lines

LOGGER = logging.getLogger("discharge.services.report_service")

EMPTY_RESULT_WARNING = "No discharge records were found in the input."


def select_mode(
    pass_through: bool = False,
    show_char_count: bool = False,
    brief: bool = False,
    pretty: bool = False,
) -> ReportMode:
    """Pick the output mode from the requested options.

    Pass-through wins over character counting, which wins over record
    extraction. ``brief`` is ignored when a pretty table is requested.
    """
    if pass_through:
        return ReportMode.RAW
    if show_char_count:
        return ReportMode.CHAR_COUNT
    if brief and not pretty:
        return ReportMode.BRIEF
    return ReportMode.RECORDS


class ReportService:
    """Service producing discharge reports from export files."""

    def __init__(
        self,
        config: DischargeConfig | None = None,
        extractor: DischargeExtractor | None = None,
    ):
        """Initialize report service.

        Args:
            config: Defaults for encoding, ordering and projection
            extractor: Extractor to use; built from ``config`` when omitted
        """
        self.config = config or DischargeConfig()
        self.extractor = extractor or DischargeExtractor(
            author_max_length=self.config.author_max_length
        )

    def run(
        self,
        input_path: Path,
        mode: ReportMode | None = None,
        legacy_sorting: bool | None = None,
        encoding: str | None = None,
    ) -> ReportResult:
        """Read ``input_path`` and build a report.

        Raises:
            InputNotFoundError: If the input file cannot be read
        """
        lines = read_lines(input_path, encoding=encoding or self.config.encoding)
        return self.build_report(lines, mode=mode, legacy_sorting=legacy_sorting)

    def build_report(
        self,
        lines: list[str],
        mode: ReportMode | None = None,
        legacy_sorting: bool | None = None,
    ) -> ReportResult:
        """Build a report from lines already in memory.

        Args:
            lines: Export lines
            mode: Output mode; defaults to BRIEF or RECORDS per configuration
            legacy_sorting: Keep emission order; defaults to configuration

        Returns:
            ReportResult; status is EMPTY when a record mode found no records
        """
        if mode is None:
            mode = select_mode(brief=self.config.brief, pretty=self.config.pretty)
        if legacy_sorting is None:
            legacy_sorting = self.config.legacy_sorting

        if mode == ReportMode.RAW:
            return ReportResult(mode=mode, lines=list(lines))
        if mode == ReportMode.CHAR_COUNT:
            return ReportResult(mode=mode, diagnostics=count_characters(lines))

        records = self.extractor.extract(lines)
        if not records:
            LOGGER.warning(EMPTY_RESULT_WARNING)
            return ReportResult(
                mode=mode,
                status=ReportStatus.EMPTY,
                warnings=[EMPTY_RESULT_WARNING],
            )

        ordered, warnings = order_records(records, legacy_sorting=legacy_sorting)
        result = ReportResult(mode=mode, records=ordered, warnings=warnings)
        if mode == ReportMode.BRIEF:
            result.brief_records = project_records(ordered)
        return result
