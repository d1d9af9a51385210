"""CSV and JSON export of report results."""

from __future__ import annotations

import csv
import json
from typing import TYPE_CHECKING, TextIO

from discharge.core.models import BRIEF_COLUMNS, RECORD_COLUMNS, ReportMode

if TYPE_CHECKING:
    from discharge.core.models import ReportResult


def result_rows(result: ReportResult) -> tuple[tuple[str, ...], list[dict]]:
    """Return the column names and row dicts for any report mode."""
    if result.mode == ReportMode.RAW:
        return ("Line",), [{"Line": line} for line in result.lines]
    if result.mode == ReportMode.CHAR_COUNT:
        return ("Length", "Content"), [
            {"Length": diag.length, "Content": diag.content} for diag in result.diagnostics
        ]
    if result.mode == ReportMode.BRIEF:
        return BRIEF_COLUMNS, [record.to_dict() for record in result.brief_records]
    return RECORD_COLUMNS, [record.to_dict() for record in result.records]


def write_json(result: ReportResult, stream: TextIO) -> None:
    """Write the result rows as a JSON array."""
    _columns, rows = result_rows(result)
    json.dump(rows, stream, indent=2, ensure_ascii=False)
    stream.write("\n")


def write_csv(result: ReportResult, stream: TextIO) -> None:
    """Write the result rows as CSV with a header line."""
    columns, rows = result_rows(result)
    writer = csv.DictWriter(stream, fieldnames=columns, lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)
