"""Opening the collection a command works on."""

import sys
from pathlib import Path
from typing import NoReturn

from adrs.cli.console import get_console
from adrs.config import Config
from adrs.domain.record.service import RecordService
from adrs.domain.shared.error import (
    AdrsError,
    AmbiguousError,
    CollectionNotFoundError,
    ConfigurationError,
    NotFoundError,
)
from adrs.infrastructure.config.resolver import ResolvedConfig, resolve_config
from adrs.infrastructure.persistence.repository.record import FileRecordRepository


def resolve_project(cwd: Path | None = None) -> ResolvedConfig:
    """Resolve settings for the current directory, honouring ADRS_CONFIG_FILE and ADRS_DIR."""
    config = Config()
    return resolve_config(
        cwd or Path.cwd(),
        config_file=config.config_file,
        adr_dir=config.dir,
    )


def open_repository(cwd: Path | None = None) -> FileRecordRepository:
    return FileRecordRepository.from_config(resolve_project(cwd))


def open_service(cwd: Path | None = None) -> RecordService:
    resolved = resolve_project(cwd)
    return RecordService(
        FileRecordRepository.from_config(resolved),
        ambiguity_ratio=resolved.settings.ambiguity_ratio,
    )


def _hint(error: AdrsError) -> str | None:
    if isinstance(error, CollectionNotFoundError):
        return "Run 'adrs init' to create a record directory"
    if isinstance(error, AmbiguousError):
        return "Use the record number or a more specific title"
    if isinstance(error, NotFoundError):
        return "Run 'adrs list' to see existing records"
    if isinstance(error, ConfigurationError):
        return "Run 'adrs config' to see which settings are in use"
    return None


def fail(error: AdrsError) -> NoReturn:
    """Report an error and exit with status 1."""
    get_console().error(error.message, hint=_hint(error))
    sys.exit(1)
