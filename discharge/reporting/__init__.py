"""Presentation of discharge reports: tables, text listings and exports."""

from discharge.reporting.export import result_rows, write_csv, write_json
from discharge.reporting.table import render_table
from discharge.reporting.text import format_text

__all__ = ["format_text", "render_table", "result_rows", "write_csv", "write_json"]
