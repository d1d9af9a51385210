"""Core data models for the discharge report parser."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum

RECORD_COLUMNS = (
    "Header",
    "Author",
    "Description",
    "Copy",
    "ItemId",
    "Type",
    "Location",
    "Date",
)

BRIEF_COLUMNS = ("Header", "Author", "Location", "Description")


class ReportMode(Enum):
    """Mutually exclusive output modes of a report run."""

    RAW = "raw"
    CHAR_COUNT = "char_count"
    RECORDS = "records"
    BRIEF = "brief"


class ReportStatus(Enum):
    """Outcome of a report run."""

    OK = "ok"
    EMPTY = "empty"


@dataclass(frozen=True)
class BriefRecord:
    """Display projection of a record: header, author, location, description."""

    header: str | None = None
    author: str | None = None
    location: str | None = None
    description: str | None = None

    def as_row(self) -> tuple[str | None, ...]:
        """Return values in BRIEF_COLUMNS order."""
        return (self.header, self.author, self.location, self.description)

    def to_dict(self) -> dict[str, str | None]:
        return dict(zip(BRIEF_COLUMNS, self.as_row(), strict=True))


@dataclass(frozen=True)
class DischargeRecord:
    """One discharged item, snapshotted at its ``Date of discharge:`` line.

    Attributes:
        header: Classification code (three characters, or a ``GN `` line)
        author: Author line, trimmed
        description: Title line containing ``" / "``, trimmed
        copy: Token following ``copy:``
        item_id: Token following ``item ID:``
        item_type: Token following ``type:``
        location: Text following ``location:`` up to the first ``-``
        date: Text following ``Date of discharge:``, untrimmed
    """

    header: str | None = None
    author: str | None = None
    description: str | None = None
    copy: str | None = None
    item_id: str | None = None
    item_type: str | None = None
    location: str | None = None
    date: str | None = None

    def as_row(self) -> tuple[str | None, ...]:
        """Return values in RECORD_COLUMNS order."""
        return tuple(getattr(self, f.name) for f in fields(self))

    def to_dict(self) -> dict[str, str | None]:
        return dict(zip(RECORD_COLUMNS, self.as_row(), strict=True))

    def brief(self) -> BriefRecord:
        """Project onto the four display fields without touching this record."""
        return BriefRecord(
            header=self.header,
            author=self.author,
            location=self.location,
            description=self.description,
        )


@dataclass
class DraftRecord:
    """Field slots accumulated while scanning.

    Slots are only ever overwritten, never cleared, so a field missing between
    two terminator lines carries the previous item's value forward.
    """

    header: str | None = None
    author: str | None = None
    description: str | None = None
    copy: str | None = None
    item_id: str | None = None
    item_type: str | None = None
    location: str | None = None

    def snapshot(self, date: str | None) -> DischargeRecord:
        """Freeze the current slots together with the terminator's date."""
        return DischargeRecord(
            header=self.header,
            author=self.author,
            description=self.description,
            copy=self.copy,
            item_id=self.item_id,
            item_type=self.item_type,
            location=self.location,
            date=date,
        )


@dataclass(frozen=True)
class LineDiagnostic:
    """Length and content of one input line, for format debugging."""

    line_no: int
    length: int
    content: str


@dataclass
class ReportResult:
    """Result of a report run.

    Exactly one of ``lines``, ``diagnostics`` or ``records`` is populated,
    depending on ``mode``. ``brief_records`` is filled in BRIEF mode as a view
    over ``records``.
    """

    mode: ReportMode
    status: ReportStatus = ReportStatus.OK
    lines: list[str] = field(default_factory=list)
    diagnostics: list[LineDiagnostic] = field(default_factory=list)
    records: list[DischargeRecord] = field(default_factory=list)
    brief_records: list[BriefRecord] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.status == ReportStatus.EMPTY
