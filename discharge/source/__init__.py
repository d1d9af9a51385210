"""Input handling for circulation exports."""

from discharge.source.reader import check_input, read_lines

__all__ = ["check_input", "read_lines"]
