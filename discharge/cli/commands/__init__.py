"""CLI command modules for the discharge report parser."""

from . import lines_cmd, report_cmd

__all__ = [
    "lines_cmd",
    "report_cmd",
]
