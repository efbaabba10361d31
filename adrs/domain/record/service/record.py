"""RecordService - finding, creating and cross-linking records."""

import logging
from dataclasses import dataclass

from adrs.domain.record.matching import score
from adrs.domain.record.model import Link, LinkKind, LinkType, Record, RecordStatus, StatusKind
from adrs.domain.record.port.repository import RecordRepository
from adrs.domain.shared.error import AmbiguousError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MAX_AMBIGUOUS_MATCHES = 5


@dataclass
class RecordService:
    """Operations on a collection that go beyond plain storage.

    Every mutation reads and validates everything it needs before the first
    write, so a failed lookup leaves the collection untouched.
    """

    repo: RecordRepository
    ambiguity_ratio: float = 2.0

    def find(self, query: str) -> Record:
        """Find a record by number or by fuzzy title match.

        A purely numeric query is a number lookup. Otherwise the best title
        match wins if it is the only match or scores more than
        ``ambiguity_ratio`` times the runner-up.

        Raises:
            NotFoundError: If nothing matches.
            AmbiguousError: If no match clearly wins.
        """
        text = query.strip()
        if text.isascii() and text.isdigit():
            return self.repo.get(int(text))

        scored = [
            (match_score, record)
            for record in self.repo.list()
            if (match_score := score(record.title, text)) is not None
        ]
        if not scored:
            raise NotFoundError(f"No record matches '{query}'")

        scored.sort(key=lambda pair: pair[0], reverse=True)
        if len(scored) == 1 or scored[0][0] > scored[1][0] * self.ambiguity_ratio:
            return scored[0][1]

        titles = [record.title for _, record in scored[:MAX_AMBIGUOUS_MATCHES]]
        raise AmbiguousError(query, titles)

    def new_record(self, title: str, status: RecordStatus | None = None) -> Record:
        """Create a record with the next free number."""
        record = Record(number=self.repo.next_number(), title=title)
        if status is not None:
            record.status = status
        self.repo.create(record)
        logger.info(f"Created record {record.number}: {title}")
        return record

    def supersede(self, title: str, superseded: int) -> Record:
        """Create a record that supersedes record ``superseded``.

        The old record is marked Superseded and linked back to the new one.
        """
        old = self.repo.get(superseded)

        record = Record(number=self.repo.next_number(), title=title)
        record.add_link(Link(target=superseded, kind=LinkKind(LinkType.SUPERSEDES)))
        self.repo.create(record)

        old.status = RecordStatus(StatusKind.SUPERSEDED)
        old.add_link(Link(target=record.require_number(), kind=LinkKind(LinkType.SUPERSEDED_BY)))
        self.repo.update(old)

        logger.info(f"Created record {record.number}, superseding {superseded}")
        return record

    def set_status(
        self,
        number: int,
        status: RecordStatus,
        superseded_by: int | None = None,
    ) -> Record:
        """Change a record's status.

        ``superseded_by`` is only valid together with status Superseded. The
        back-link is added once; repeating the call does not duplicate it.
        """
        if superseded_by is not None and status.kind != StatusKind.SUPERSEDED:
            raise ValidationError(
                f"A superseding record can only be given with status Superseded, not '{status}'",
                field="superseded_by",
            )

        record = self.repo.get(number)
        if superseded_by is not None:
            self.repo.get(superseded_by)

        record.status = status
        if superseded_by is not None:
            link = Link(target=superseded_by, kind=LinkKind(LinkType.SUPERSEDED_BY))
            if link not in record.links:
                record.add_link(link)

        self.repo.update(record)
        logger.info(f"Set status of record {number} to {status}")
        return record

    def link(
        self,
        source: int,
        target: int,
        source_kind: LinkKind,
        target_kind: LinkKind,
    ) -> tuple[Record, Record]:
        """Link two records in both directions.

        ``source`` gets a ``source_kind`` link to ``target`` and ``target``
        gets a ``target_kind`` link back.
        """
        source_record = self.repo.get(source)
        target_record = source_record if target == source else self.repo.get(target)

        source_record.add_link(Link(target=target, kind=source_kind))
        target_record.add_link(Link(target=source, kind=target_kind))

        self.repo.update(source_record)
        if target_record is not source_record:
            self.repo.update(target_record)
        logger.info(f"Linked record {source} ({source_kind}) to {target} ({target_kind})")
        return source_record, target_record
