"""Show a single record."""

import cyclopts

from adrs.cli.console import get_console
from adrs.cli.util import fail, open_service
from adrs.domain.shared.error import AdrsError

app = cyclopts.App(name="show", help="Show a record by number or title")


@app.default
def show(query: str, /) -> None:
    """Show a record.

    Args:
        query: Record number (e.g. 3) or part of its title (e.g. 'postgres').
    """
    try:
        record = open_service().find(query)
    except AdrsError as e:
        fail(e)

    get_console().record_detail(record)
