"""Record aggregate - one architectural decision and its metadata."""

import datetime as dt
from pathlib import Path

from pydantic import Field, PositiveInt

from adrs.domain.record.model.naming import record_filename
from adrs.domain.record.model.value import Link, RecordStatus, StatusKind
from adrs.domain.shared.error import FormatError
from adrs.domain.shared.model.aggregate import Aggregate


class Record(Aggregate):
    """A decision record.

    ``number`` is required but may be None for a record parsed from text that
    carried no number; such a record cannot be named until one is assigned.
    Body sections default to empty text. ``source_path`` points back at the
    file the record was read from and is not part of the document.
    """

    number: PositiveInt | None
    title: str
    date: dt.date = Field(default_factory=dt.date.today)
    status: RecordStatus = RecordStatus(StatusKind.PROPOSED)
    links: list[Link] = Field(default_factory=list)
    context: str = ""
    decision: str = ""
    consequences: str = ""

    # Structured-mode metadata
    tags: list[str] = Field(default_factory=list)
    decision_makers: list[str] = Field(default_factory=list)
    consulted: list[str] = Field(default_factory=list)
    informed: list[str] = Field(default_factory=list)

    source_path: Path | None = None

    def require_number(self) -> int:
        if self.number is None:
            raise FormatError(f"Record '{self.title}' has no number", path=self.source_path)
        return self.number

    def filename(self) -> str:
        """Canonical filename, e.g. ``0001-use-rust.md``."""
        return record_filename(self.require_number(), self.title)

    def full_title(self) -> str:
        """Title with number prefix, e.g. ``1. Use Rust``."""
        return f"{self.number}. {self.title}"

    def add_link(self, link: Link) -> None:
        self.links.append(link)
