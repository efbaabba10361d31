"""Filesystem implementation of RecordRepository."""

import logging
from pathlib import Path

from adrs.config import DEFAULT_ADR_DIR, ProjectSettings
from adrs.domain.record.model import RECORD_EXTENSION, Record, RecordStatus, StatusKind
from adrs.domain.record.parse import parse_file
from adrs.domain.record.port.repository import RecordRepository, ScanResult
from adrs.domain.record.render import Mode, render
from adrs.domain.shared.error import (
    CollectionNotFoundError,
    ConflictError,
    FormatError,
    NotFoundError,
    StorageError,
)
from adrs.infrastructure.config.resolver import ResolvedConfig, save_settings

logger = logging.getLogger(__name__)

INITIAL_TITLE = "Record architecture decisions"
INITIAL_CONTEXT = "We need to record the architectural decisions made on this project."
INITIAL_DECISION = (
    "We will use Architecture Decision Records, as described by Michael Nygard "
    'in his article "Documenting Architecture Decisions".'
)
INITIAL_CONSEQUENCES = (
    "See Michael Nygard's article, linked above. "
    "For a lightweight ADR toolset, see Nat Pryce's adr-tools."
)


def _is_record_file(path: Path) -> bool:
    first = path.name[:1]
    return first.isascii() and first.isdigit() and path.suffix == RECORD_EXTENSION


class FileRecordRepository(RecordRepository):
    """Record collection stored as one markdown file per record.

    Nothing is cached: every read rescans the directory, so files added or
    removed by hand are picked up by the next call.
    """

    def __init__(self, root: Path, settings: ProjectSettings) -> None:
        self.root = root
        self.settings = settings

    @classmethod
    def from_config(cls, config: ResolvedConfig) -> "FileRecordRepository":
        return cls(config.root, config.settings)

    @property
    def directory(self) -> Path:
        return self.root / self.settings.adr_dir

    @property
    def mode(self) -> Mode:
        return self.settings.mode

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def scan(self) -> ScanResult:
        """Parse every record file in the directory.

        Files that cannot be read or parsed are skipped and reported in
        ``ScanResult.skipped``.

        Raises:
            CollectionNotFoundError: If the record directory does not exist.
        """
        if not self.directory.is_dir():
            raise CollectionNotFoundError(self.directory)
        try:
            candidates = sorted(p for p in self.directory.iterdir() if _is_record_file(p) and p.is_file())
        except OSError as e:
            raise StorageError(f"Failed to list {self.directory}: {e}", path=self.directory) from e

        records: list[Record] = []
        skipped: list[Path] = []
        for path in candidates:
            try:
                records.append(parse_file(path))
            except (FormatError, StorageError) as e:
                logger.debug(f"Skipping {path.name}: {e.message}")
                skipped.append(path)

        records.sort(key=lambda r: r.require_number())
        return ScanResult(records=records, skipped=skipped)

    def list(self) -> list[Record]:
        return self.scan().records

    def next_number(self) -> int:
        records = self.list()
        return records[-1].require_number() + 1 if records else 1

    def get(self, number: int) -> Record:
        for record in self.list():
            if record.number == number:
                return record
        raise NotFoundError(f"Record {number} not found in {self.directory}")

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def _titles(self, record: Record) -> dict[int, str]:
        titles = {r.require_number(): r.title for r in self.list()}
        titles[record.require_number()] = record.title
        return titles

    def _write(self, record: Record, path: Path) -> Path:
        text = render(record, self.mode, self._titles(record))
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}", path=path) from e
        record.source_path = path
        logger.debug(f"Wrote record {record.number} to {path}")
        return path

    def create(self, record: Record) -> Path:
        """Write a new record file. An existing file of the same name is overwritten."""
        return self._write(record, self.directory / record.filename())

    def update(self, record: Record) -> Path:
        """Rewrite a record in place, at the file it was read from."""
        return self._write(record, record.source_path or self.directory / record.filename())

    # -------------------------------------------------------------------------
    # Initialisation
    # -------------------------------------------------------------------------

    @classmethod
    def init(
        cls,
        root: Path,
        directory: Path = DEFAULT_ADR_DIR,
        mode: Mode = Mode.COMPATIBLE,
    ) -> "FileRecordRepository":
        """Create a new collection under ``root``.

        Creates the record directory, saves the settings and writes record 1,
        which records the decision to keep decision records.

        Raises:
            ConflictError: If the record directory already exists.
        """
        settings = ProjectSettings(adr_dir=directory, mode=mode)
        repo = cls(root, settings)
        if repo.directory.exists():
            raise ConflictError(f"Record directory already exists: {repo.directory}")

        try:
            repo.directory.mkdir(parents=True)
        except OSError as e:
            raise StorageError(f"Failed to create {repo.directory}: {e}", path=repo.directory) from e
        save_settings(root, settings)

        repo.create(
            Record(
                number=1,
                title=INITIAL_TITLE,
                status=RecordStatus(StatusKind.ACCEPTED),
                context=INITIAL_CONTEXT,
                decision=INITIAL_DECISION,
                consequences=INITIAL_CONSEQUENCES,
            )
        )
        logger.info(f"Initialised record collection at {repo.directory}")
        return repo
