"""Line rules for the circulation discharge export.

Each rule pairs a predicate with an action that writes one field slot of the
draft record. Every rule is tested against every line; several rules may fire
on the same line because they write different slots.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from discharge.core.config import DEFAULT_AUTHOR_MAX_LENGTH
from discharge.core.models import DraftRecord

TERMINATOR_MARKER = "Date of discharge:"
COPY_MARKER = "copy:"
ITEM_ID_MARKER = "item ID:"
TYPE_MARKER = "type:"
LOCATION_MARKER = "location:"
DESCRIPTION_SEPARATOR = " / "
GRAPHIC_NOVEL_PREFIX = "GN "
HEADER_LENGTH = 3


@dataclass(frozen=True)
class LineRule:
    """A named ``(predicate, action)`` pair applied to every line."""

    name: str
    matches: Callable[[str], bool]
    apply: Callable[[DraftRecord, str], None]


def text_after(line: str, marker: str) -> str:
    """Return everything after the first occurrence of ``marker``."""
    return line.split(marker, 1)[1]


def token_after(line: str, marker: str) -> str:
    """Return the first whitespace-delimited token after ``marker``.

    Returns an empty string when nothing follows the marker.
    """
    parts = text_after(line, marker).split()
    return parts[0] if parts else ""


def is_terminator(line: str) -> bool:
    return TERMINATOR_MARKER in line


def discharge_date(line: str) -> str:
    """Date text of a terminator line, leading space preserved."""
    return text_after(line, TERMINATOR_MARKER)


def _is_header(line: str) -> bool:
    return len(line) == HEADER_LENGTH or line.startswith(GRAPHIC_NOVEL_PREFIX)


def _set_header(draft: DraftRecord, line: str) -> None:
    # Headers are stored verbatim, including surrounding whitespace.
    if len(line) == HEADER_LENGTH:
        draft.header = line
    elif line.startswith(GRAPHIC_NOVEL_PREFIX):
        draft.header = line


def _set_author(draft: DraftRecord, line: str) -> None:
    draft.author = line.strip()


def _set_description(draft: DraftRecord, line: str) -> None:
    draft.description = line.strip()


def _set_copy(draft: DraftRecord, line: str) -> None:
    draft.copy = token_after(line, COPY_MARKER)


def _set_item_id(draft: DraftRecord, line: str) -> None:
    # The export sometimes doubles the colon after the marker ("item ID: ::123").
    draft.item_id = token_after(line, ITEM_ID_MARKER).lstrip(":")


def _set_type(draft: DraftRecord, line: str) -> None:
    draft.item_type = token_after(line, TYPE_MARKER)


def _set_location(draft: DraftRecord, line: str) -> None:
    location = text_after(line, LOCATION_MARKER)
    if "-" in location:
        location = location.split("-", 1)[0]
    draft.location = location.strip()


def build_rules(author_max_length: int = DEFAULT_AUTHOR_MAX_LENGTH) -> list[LineRule]:
    """Build the field rule table.

    Args:
        author_max_length: Lines this long or longer are never taken as authors

    Returns:
        Rules in evaluation order
    """
    return [
        LineRule("header", _is_header, _set_header),
        LineRule(
            "author",
            lambda line: "," in line and len(line) < author_max_length,
            _set_author,
        ),
        LineRule("description", lambda line: DESCRIPTION_SEPARATOR in line, _set_description),
        LineRule("copy", lambda line: COPY_MARKER in line, _set_copy),
        LineRule("item_id", lambda line: ITEM_ID_MARKER in line, _set_item_id),
        LineRule("type", lambda line: TYPE_MARKER in line, _set_type),
        LineRule("location", lambda line: LOCATION_MARKER in line, _set_location),
    ]
