"""Plain text listing of report results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from discharge.core.models import ReportMode
from discharge.reporting.export import result_rows
from discharge.reporting.table import render_table

if TYPE_CHECKING:
    from discharge.core.models import ReportResult


def _format_block(row: dict) -> str:
    width = max(len(name) for name in row)
    return "\n".join(
        f"{name.ljust(width)} : {'' if value is None else value}" for name, value in row.items()
    )


def format_text(result: ReportResult, pretty: bool = False) -> str:
    """Format a result for the terminal.

    Raw lines print as-is, character counts as ``length content`` pairs and
    records as one ``name : value`` block per record. With ``pretty`` every
    mode renders as an auto-sized table instead.
    """
    columns, rows = result_rows(result)
    if pretty:
        return render_table(columns, [[row[name] for name in columns] for row in rows])

    if result.mode == ReportMode.RAW:
        return "\n".join(result.lines)
    if result.mode == ReportMode.CHAR_COUNT:
        return "\n".join(f"{diag.length:>5} {diag.content}" for diag in result.diagnostics)
    return "\n\n".join(_format_block(row) for row in rows)
