"""Check the collection for problems."""

import sys

import cyclopts

from adrs.cli.console import get_console
from adrs.cli.util import fail, open_repository
from adrs.domain.doctor.model import Severity
from adrs.domain.doctor.service import DoctorService
from adrs.domain.shared.error import AdrsError

app = cyclopts.App(name="doctor", help="Check records for consistency problems")


@app.default
def doctor() -> None:
    """Report duplicate numbers, broken links, misnamed files and similar problems.

    Exits with status 1 when any error is found.
    """
    console = get_console()

    try:
        report = DoctorService(open_repository()).check()
    except AdrsError as e:
        fail(e)

    if not report.diagnostics:
        console.success("No problems found")
        return

    for diagnostic in report.diagnostics:
        console.diagnostic(diagnostic)

    console.print()
    console.print(
        f"{report.count_by_severity(Severity.ERROR)} error(s), "
        f"{report.count_by_severity(Severity.WARNING)} warning(s), "
        f"{report.count_by_severity(Severity.INFO)} info"
    )
    if report.has_errors():
        sys.exit(1)
