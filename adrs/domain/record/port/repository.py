"""RecordRepository port - storage interface for a record collection."""

from abc import abstractmethod
from pathlib import Path
from typing import Protocol

from adrs.domain.record.model import Record
from adrs.domain.shared.model import ValueObject


class ScanResult(ValueObject):
    """Records read from the collection, in ascending number order, plus files that could not be read."""

    records: list[Record]
    skipped: list[Path] = []


class RecordRepository(Protocol):
    @property
    @abstractmethod
    def directory(self) -> Path: ...

    @abstractmethod
    def scan(self) -> ScanResult: ...

    @abstractmethod
    def list(self) -> list[Record]: ...

    @abstractmethod
    def next_number(self) -> int: ...

    @abstractmethod
    def get(self, number: int) -> Record: ...

    @abstractmethod
    def create(self, record: Record) -> Path: ...

    @abstractmethod
    def update(self, record: Record) -> Path: ...
