"""Read a circulation export into a list of lines."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from discharge.core.exceptions import InputNotFoundError

LOGGER = logging.getLogger("discharge.source.reader")


def check_input(path: Path) -> Path:
    """Verify that ``path`` references an existing readable file.

    Raises:
        InputNotFoundError: If the path is missing, not a regular file or unreadable
    """
    expanded = Path(path).expanduser()
    if not expanded.exists():
        raise InputNotFoundError(f"Input file not found: {expanded}")
    if not expanded.is_file():
        raise InputNotFoundError(f"Input path is not a file: {expanded}")
    if not os.access(expanded, os.R_OK):
        raise InputNotFoundError(f"Input file is not readable: {expanded}")
    return expanded


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read the whole file and split it into lines.

    Only CRLF, LF and CR end a line, so CRLF, LF and CR exports split the
    same way. Form feeds and the other separators ``str.splitlines`` breaks
    on stay inside the line. Undecodable bytes are replaced rather than
    aborting the read.

    Args:
        path: Path to the export file
        encoding: Text encoding of the export

    Returns:
        Lines of the file, without line terminators
    """
    checked = check_input(path)
    with checked.open("r", encoding=encoding, errors="replace", newline=None) as export_file:
        text = export_file.read()

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    LOGGER.debug(f"Read {len(lines)} lines from {checked}")
    return lines
