"""Change a record's status."""

import cyclopts

from adrs.cli.console import get_console
from adrs.cli.util import fail, open_service
from adrs.domain.record.model import RecordStatus
from adrs.domain.shared.error import AdrsError

app = cyclopts.App(name="status", help="Change the status of a record")


@app.default
def status(number: int, new_status: str, /, *, by: int | None = None) -> None:
    """Set a record's status.

    Args:
        number: Record number.
        new_status: New status, e.g. accepted, deprecated, superseded.
        by: Number of the superseding record. Only valid with status superseded.
    """
    try:
        record = open_service().set_status(number, RecordStatus(new_status), superseded_by=by)
    except AdrsError as e:
        fail(e)

    get_console().success(f"{record.full_title()} is now {record.status}")
