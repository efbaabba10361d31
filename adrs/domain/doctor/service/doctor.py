"""DoctorService - consistency checks over a whole record collection."""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from adrs.domain.doctor.model import Check, Diagnostic, DoctorReport, Severity
from adrs.domain.record.model import LinkType, Record, StatusKind, number_prefix
from adrs.domain.record.port.repository import RecordRepository

logger = logging.getLogger(__name__)

MAX_LISTED_GAPS = 5
ABBREVIATED_GAPS = 3


def check_duplicate_numbers(records: list[Record]) -> list[Diagnostic]:
    by_number: dict[int, list[Record]] = defaultdict(list)
    for record in records:
        by_number[record.require_number()].append(record)

    diagnostics = []
    for number, duplicates in sorted(by_number.items()):
        if len(duplicates) < 2:
            continue
        names = ", ".join(r.source_path.name for r in duplicates if r.source_path is not None)
        diagnostics.append(
            Diagnostic(
                severity=Severity.ERROR,
                check=Check.DUPLICATE_NUMBERS,
                message=f"Record number {number} is used by multiple files: {names}",
                record_number=number,
            )
        )
    return diagnostics


def check_file_naming(records: list[Record]) -> list[Diagnostic]:
    diagnostics = []
    for record in records:
        if record.source_path is None:
            continue
        expected = number_prefix(record.require_number())
        if not record.source_path.name.startswith(expected):
            diagnostics.append(
                Diagnostic(
                    severity=Severity.WARNING,
                    check=Check.FILE_NAMING,
                    message=f"File '{record.source_path.name}' should start with '{expected}'",
                    path=record.source_path,
                    record_number=record.number,
                )
            )
    return diagnostics


def check_missing_status(records: list[Record]) -> list[Diagnostic]:
    return [
        Diagnostic(
            severity=Severity.WARNING,
            check=Check.MISSING_STATUS,
            message=f"Record {record.number} '{record.title}' has an empty status",
            path=record.source_path,
            record_number=record.number,
        )
        for record in records
        if record.status.is_blank
    ]


def check_broken_links(records: list[Record]) -> list[Diagnostic]:
    existing = {record.number for record in records}
    return [
        Diagnostic(
            severity=Severity.ERROR,
            check=Check.BROKEN_LINKS,
            message=f"Record {record.number} '{record.title}' links to non-existent record {link.target}",
            path=record.source_path,
            record_number=record.number,
        )
        for record in records
        for link in record.links
        if link.target not in existing
    ]


def check_numbering_gaps(records: list[Record]) -> list[Diagnostic]:
    numbers = {record.require_number() for record in records}
    if not numbers:
        return []
    missing = [n for n in range(min(numbers), max(numbers) + 1) if n not in numbers]
    if not missing:
        return []

    if len(missing) <= MAX_LISTED_GAPS:
        listed = ", ".join(str(n) for n in missing)
    else:
        head = ", ".join(str(n) for n in missing[:ABBREVIATED_GAPS])
        listed = f"{head}, ... ({len(missing)} total)"
    return [
        Diagnostic(
            severity=Severity.INFO,
            check=Check.NUMBERING_GAPS,
            message=f"Missing record numbers in sequence: {listed}",
        )
    ]


def check_superseded_links(records: list[Record]) -> list[Diagnostic]:
    return [
        Diagnostic(
            severity=Severity.WARNING,
            check=Check.SUPERSEDED_LINKS,
            message=(
                f"Record {record.number} '{record.title}' has status 'Superseded' "
                "but no 'Superseded by' link"
            ),
            path=record.source_path,
            record_number=record.number,
        )
        for record in records
        if record.status.kind == StatusKind.SUPERSEDED
        and not any(link.kind.link_type == LinkType.SUPERSEDED_BY for link in record.links)
    ]


def check_unparseable_files(skipped: list[Path]) -> list[Diagnostic]:
    if not skipped:
        return []
    names = ", ".join(path.name for path in skipped)
    return [
        Diagnostic(
            severity=Severity.WARNING,
            check=Check.UNPARSEABLE_FILES,
            message=f"{len(skipped)} file(s) could not be parsed and were skipped: {names}",
        )
    ]


RECORD_CHECKS: tuple[Callable[[list[Record]], list[Diagnostic]], ...] = (
    check_duplicate_numbers,
    check_file_naming,
    check_missing_status,
    check_broken_links,
    check_numbering_gaps,
    check_superseded_links,
)


@dataclass
class DoctorService:
    """Runs every check against the collection.

    Checks only report; nothing is ever changed. The only failure is the
    collection itself being unreadable.
    """

    repo: RecordRepository

    def check(self) -> DoctorReport:
        scan = self.repo.scan()
        diagnostics: list[Diagnostic] = []
        for rule in RECORD_CHECKS:
            diagnostics.extend(rule(scan.records))
        diagnostics.extend(check_unparseable_files(scan.skipped))

        report = DoctorReport.from_diagnostics(diagnostics)
        logger.debug(
            f"Checked {len(scan.records)} records: "
            f"{report.count_by_severity(Severity.ERROR)} errors, "
            f"{report.count_by_severity(Severity.WARNING)} warnings"
        )
        return report
