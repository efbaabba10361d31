"""List records."""

import cyclopts

from adrs.cli.console import get_console
from adrs.cli.util import fail, open_repository
from adrs.domain.shared.error import AdrsError

app = cyclopts.App(name="list", help="List records in number order")


@app.default
def list_records() -> None:
    """List every record with its date and status."""
    console = get_console()

    try:
        records = open_repository().list()
    except AdrsError as e:
        fail(e)

    if not records:
        console.info("No records found")
        return

    console.table(
        [
            {
                "number": record.number,
                "date": record.date.isoformat(),
                "status": str(record.status),
                "title": record.title,
            }
            for record in records
        ],
        [("number", "#"), ("date", "Date"), ("status", "Status"), ("title", "Title")],
    )
