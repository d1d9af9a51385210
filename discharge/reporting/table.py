"""Plain text table rendering."""

from __future__ import annotations

from collections.abc import Sequence


def _cell(value: object) -> str:
    return "" if value is None else str(value)


def render_table(columns: Sequence[str], rows: Sequence[Sequence[object]]) -> str:
    """Render rows as a table with columns sized to their widest cell.

    Args:
        columns: Column titles
        rows: Row values in column order; None renders as an empty cell

    Returns:
        Table text with a header line, a dashed rule and one line per row
    """
    cells = [[_cell(value) for value in row] for row in rows]
    widths = [len(title) for title in columns]
    for row in cells:
        for index, value in enumerate(row):
            widths[index] = max(widths[index], len(value))

    def format_line(values: Sequence[str]) -> str:
        padded = [value.ljust(width) for value, width in zip(values, widths, strict=True)]
        return " ".join(padded).rstrip()

    lines = [format_line(list(columns))]
    lines.append(" ".join("-" * width for width in widths))
    lines.extend(format_line(row) for row in cells)
    return "\n".join(lines)
