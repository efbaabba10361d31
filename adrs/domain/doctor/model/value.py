"""Doctor value objects: diagnostics and the report that collects them."""

from enum import IntEnum, StrEnum
from pathlib import Path

from pydantic import Field

from adrs.domain.shared.model import ValueObject


class Severity(IntEnum):
    """How serious a diagnostic is. Compares Info < Warning < Error."""

    INFO = 0
    WARNING = 1
    ERROR = 2

    def __str__(self) -> str:
        return self.name.lower()


class Check(StrEnum):
    DUPLICATE_NUMBERS = "duplicate-numbers"
    FILE_NAMING = "file-naming"
    MISSING_STATUS = "missing-status"
    BROKEN_LINKS = "broken-links"
    NUMBERING_GAPS = "numbering-gaps"
    SUPERSEDED_LINKS = "superseded-links"
    UNPARSEABLE_FILES = "unparseable-files"


class Diagnostic(ValueObject):
    severity: Severity
    check: Check
    message: str
    path: Path | None = None
    record_number: int | None = None


class DoctorReport(ValueObject):
    """Diagnostics ordered by descending severity."""

    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @classmethod
    def from_diagnostics(cls, diagnostics: list[Diagnostic]) -> "DoctorReport":
        # sorted() is stable, so rule order survives within a severity
        return cls(diagnostics=sorted(diagnostics, key=lambda d: d.severity, reverse=True))

    def has_errors(self) -> bool:
        return self.count_by_severity(Severity.ERROR) > 0

    def has_warnings(self) -> bool:
        return self.count_by_severity(Severity.WARNING) > 0

    def is_healthy(self) -> bool:
        """True when nothing above Info was found."""
        return not self.has_errors() and not self.has_warnings()

    def count_by_severity(self, severity: Severity) -> int:
        return sum(1 for d in self.diagnostics if d.severity == severity)
