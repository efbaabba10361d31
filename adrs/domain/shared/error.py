"""Error hierarchy for adrs.

Error layers:
- AdrsError: Base class for all adrs errors
- DomainError: Missing records, ambiguous queries, malformed documents
- InfrastructureError: Filesystem failures and unreadable settings

The CLI maps every AdrsError to a one-line message and a non-zero exit code.
"""

from pathlib import Path


class AdrsError(Exception):
    """Base class for all adrs errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (record and collection rule violations)
# =============================================================================


class DomainError(AdrsError):
    """Base class for domain errors."""


class NotFoundError(DomainError):
    """Record not found."""


class CollectionNotFoundError(NotFoundError):
    """The record directory does not exist."""

    def __init__(self, directory: Path) -> None:
        super().__init__(
            f"Record directory not found: {directory}",
            code="COLLECTION_NOT_FOUND",
        )
        self.directory = directory


class AmbiguousError(DomainError):
    """A query matched more than one record and no match clearly won."""

    def __init__(self, query: str, matches: list[str]) -> None:
        listed = ", ".join(repr(m) for m in matches)
        super().__init__(f"Multiple records match '{query}': {listed}", code="AMBIGUOUS")
        self.query = query
        self.matches = matches


class FormatError(DomainError):
    """Document text could not be turned into a record."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message, code="FORMAT_ERROR")
        self.path = path


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class ConflictError(DomainError):
    """Resource already exists."""


# =============================================================================
# Infrastructure Errors (filesystem and settings failures)
# =============================================================================


class InfrastructureError(AdrsError):
    """Base class for infrastructure/system errors."""


class StorageError(InfrastructureError):
    """Reading or writing the record directory failed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message, code="IO_ERROR")
        self.path = path


class ConfigurationError(InfrastructureError):
    """Settings file is malformed or unreadable."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message, code="CONFIG_ERROR")
        self.path = path
