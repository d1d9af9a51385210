"""Single-pass extractor turning export lines into discharge records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from discharge.core.config import DEFAULT_AUTHOR_MAX_LENGTH
from discharge.core.models import DischargeRecord, DraftRecord, LineDiagnostic
from discharge.extractors.rules import LineRule, build_rules, discharge_date, is_terminator

LOGGER = logging.getLogger("discharge.extractors.discharge_extractor")


class DischargeExtractor:
    """Scan export lines and emit one record per ``Date of discharge:`` line.

    The extractor itself is stateless between calls; each call to
    :meth:`extract` starts from an empty draft record.
    """

    def __init__(
        self,
        author_max_length: int = DEFAULT_AUTHOR_MAX_LENGTH,
        rules: list[LineRule] | None = None,
    ):
        """Initialize the extractor.

        Args:
            author_max_length: Upper bound (exclusive) on author line length
            rules: Field rules to use instead of the default table
        """
        self.author_max_length = author_max_length
        self.rules = rules if rules is not None else build_rules(author_max_length)

    @property
    def name(self) -> str:
        return "discharge"

    def extract(self, lines: Iterable[str]) -> list[DischargeRecord]:
        """Extract records from lines.

        Args:
            lines: Export lines without line terminators

        Returns:
            Records in input order, one per terminator line
        """
        draft = DraftRecord()
        records: list[DischargeRecord] = []
        line_count = 0

        for line_count, line in enumerate(lines, start=1):
            for rule in self.rules:
                if rule.matches(line):
                    rule.apply(draft, line)

            if is_terminator(line):
                record = draft.snapshot(discharge_date(line))
                records.append(record)
                LOGGER.debug(f"Line {line_count}: emitted record {len(records)}: {record}")

        LOGGER.info(
            f"[{self.name}] Scanned {line_count} lines, extracted {len(records)} records"
        )
        return records


def count_characters(lines: Iterable[str]) -> list[LineDiagnostic]:
    """Return the length and content of every line."""
    return [
        LineDiagnostic(line_no=line_no, length=len(line), content=line)
        for line_no, line in enumerate(lines, start=1)
    ]
