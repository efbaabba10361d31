"""Unit tests for DoctorService."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from adrs.domain.doctor.model import Check, Diagnostic, DoctorReport, Severity
from adrs.domain.doctor.service import DoctorService
from adrs.domain.record.model import Link, LinkKind, LinkType, Record, RecordStatus
from adrs.domain.record.port.repository import RecordRepository, ScanResult
from adrs.domain.shared.error import CollectionNotFoundError


def make_record(
    number: int,
    *,
    filename: str | None = None,
    status: str = "accepted",
    links: list[Link] | None = None,
) -> Record:
    return Record(
        number=number,
        title=f"Record {number}",
        status=RecordStatus(status),
        links=links or [],
        source_path=Path("/adr") / (filename or f"{number:04d}-record-{number}.md"),
    )


def run_check(records: list[Record], skipped: list[Path] | None = None) -> DoctorReport:
    repo = Mock(spec=RecordRepository)
    repo.scan.return_value = ScanResult(records=records, skipped=skipped or [])
    return DoctorService(repo).check()


def only(report: DoctorReport, check: Check) -> list[Diagnostic]:
    return [d for d in report.diagnostics if d.check == check]


class TestSeverity:
    def test_ordering(self):
        assert Severity.INFO < Severity.WARNING < Severity.ERROR

    def test_str(self):
        assert str(Severity.WARNING) == "warning"


class TestHealthyCollection:
    def test_empty_collection(self):
        report = run_check([])

        assert report.diagnostics == []
        assert report.is_healthy()

    def test_consistent_collection(self):
        records = [
            make_record(
                1, status="superseded", links=[Link(target=2, kind=LinkKind(LinkType.SUPERSEDED_BY))]
            ),
            make_record(2, links=[Link(target=1, kind=LinkKind(LinkType.SUPERSEDES))]),
        ]

        report = run_check(records)

        assert report.diagnostics == []
        assert not report.has_errors()
        assert not report.has_warnings()


class TestBrokenLinks:
    def test_link_to_absent_record(self):
        records = [make_record(1, links=[Link(target=2, kind=LinkKind(LinkType.SUPERSEDES))])]

        report = run_check(records)

        assert report.count_by_severity(Severity.ERROR) == 1
        assert len(report.diagnostics) == 1
        diagnostic = report.diagnostics[0]
        assert diagnostic.check == Check.BROKEN_LINKS
        assert diagnostic.record_number == 1
        assert "non-existent record 2" in diagnostic.message


class TestDuplicateNumbers:
    def test_one_error_names_both_files(self):
        records = [
            make_record(7, filename="0007-first.md"),
            make_record(7, filename="0007-second.md"),
        ]

        report = run_check(records)

        assert report.count_by_severity(Severity.ERROR) == 1
        [diagnostic] = only(report, Check.DUPLICATE_NUMBERS)
        assert "0007-first.md" in diagnostic.message
        assert "0007-second.md" in diagnostic.message
        assert diagnostic.record_number == 7


class TestNumberingGaps:
    def test_lists_missing_numbers(self):
        report = run_check([make_record(1), make_record(3), make_record(5)])

        [diagnostic] = only(report, Check.NUMBERING_GAPS)
        assert diagnostic.severity == Severity.INFO
        assert diagnostic.message.endswith(": 2, 4")
        assert report.is_healthy()

    def test_abbreviates_long_gaps(self):
        report = run_check([make_record(1), make_record(10)])

        [diagnostic] = only(report, Check.NUMBERING_GAPS)
        assert diagnostic.message.endswith(": 2, 3, 4, ... (8 total)")

    def test_five_missing_are_all_listed(self):
        report = run_check([make_record(1), make_record(7)])

        [diagnostic] = only(report, Check.NUMBERING_GAPS)
        assert diagnostic.message.endswith(": 2, 3, 4, 5, 6")

    def test_range_starts_at_lowest_number(self):
        report = run_check([make_record(3), make_record(4)])

        assert only(report, Check.NUMBERING_GAPS) == []


class TestFileNaming:
    def test_unpadded_filename(self):
        report = run_check([make_record(3, filename="3-record.md")])

        [diagnostic] = only(report, Check.FILE_NAMING)
        assert diagnostic.severity == Severity.WARNING
        assert "'0003-'" in diagnostic.message
        assert diagnostic.path == Path("/adr/3-record.md")

    def test_wrong_number_in_filename(self):
        report = run_check([make_record(3, filename="0004-record.md")])

        assert len(only(report, Check.FILE_NAMING)) == 1

    def test_record_without_path_is_skipped(self):
        record = make_record(1)
        record.source_path = None

        assert only(run_check([record]), Check.FILE_NAMING) == []


class TestMissingStatus:
    @pytest.mark.parametrize("status", ["", "   "])
    def test_blank_status(self, status: str):
        report = run_check([make_record(1, status=status)])

        [diagnostic] = only(report, Check.MISSING_STATUS)
        assert diagnostic.severity == Severity.WARNING

    def test_custom_status_is_fine(self):
        assert only(run_check([make_record(1, status="On hold")]), Check.MISSING_STATUS) == []


class TestSupersededLinks:
    @pytest.mark.parametrize("status", ["superseded", "Superceded"])
    def test_superseded_without_back_link(self, status: str):
        report = run_check([make_record(1, status=status)])

        [diagnostic] = only(report, Check.SUPERSEDED_LINKS)
        assert diagnostic.severity == Severity.WARNING
        assert diagnostic.record_number == 1

    def test_custom_status_mentioning_superseded_is_ignored(self):
        report = run_check([make_record(1, status="Superseded-ish")])

        assert only(report, Check.SUPERSEDED_LINKS) == []


class TestUnparseableFiles:
    def test_skipped_files_are_reported(self):
        report = run_check([make_record(1)], skipped=[Path("/adr/0002-broken.md")])

        [diagnostic] = only(report, Check.UNPARSEABLE_FILES)
        assert diagnostic.severity == Severity.WARNING
        assert "0002-broken.md" in diagnostic.message
        assert report.has_warnings()


class TestReportOrdering:
    def test_sorted_by_descending_severity(self):
        records = [
            make_record(1),
            make_record(3, status="", links=[Link(target=9, kind=LinkKind("Amends"))]),
        ]

        report = run_check(records)

        severities = [d.severity for d in report.diagnostics]
        assert severities == sorted(severities, reverse=True)
        assert severities[0] == Severity.ERROR
        assert severities[-1] == Severity.INFO

    def test_scan_failure_propagates(self):
        repo = Mock(spec=RecordRepository)
        repo.scan.side_effect = CollectionNotFoundError(Path("/missing"))

        with pytest.raises(CollectionNotFoundError):
            DoctorService(repo).check()
