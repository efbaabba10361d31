"""Create a new record."""

import cyclopts

from adrs.cli.console import get_console
from adrs.cli.util import fail, open_service
from adrs.domain.record.model import LinkKind, RecordStatus
from adrs.domain.shared.error import AdrsError, ValidationError

app = cyclopts.App(name="new", help="Create a new record")


def parse_link_spec(spec: str) -> tuple[int, LinkKind, LinkKind]:
    """Parse ``TARGET:KIND:REVERSE``, e.g. ``3:Amends:Amended by``."""
    parts = spec.split(":")
    number = parts[0].strip()
    if len(parts) != 3 or not (number.isascii() and number.isdigit()):
        raise ValidationError(f"Invalid link '{spec}', expected TARGET:KIND:REVERSE", field="link")
    _, kind, reverse = parts
    return int(number), LinkKind(kind.strip()), LinkKind(reverse.strip())


@app.default
def new(
    title: str,
    /,
    *,
    supersedes: int | None = None,
    link: list[str] | None = None,
    status: str | None = None,
) -> None:
    """Create a record with the next free number.

    Args:
        title: Title of the decision.
        supersedes: Number of a record this one replaces. It is marked Superseded.
        link: Link to another record as TARGET:KIND:REVERSE. Repeatable.
        status: Initial status. Defaults to Proposed.
    """
    console = get_console()

    try:
        links = [parse_link_spec(spec) for spec in link or []]
        service = open_service()
        for target, _, _ in links:
            service.repo.get(target)

        if supersedes is not None:
            record = service.supersede(title, supersedes)
            if status is not None:
                record = service.set_status(record.require_number(), RecordStatus(status))
        else:
            record = service.new_record(title, RecordStatus(status) if status is not None else None)

        number = record.require_number()
        for target, kind, reverse in links:
            record, _ = service.link(number, target, kind, reverse)
    except AdrsError as e:
        fail(e)

    console.success(f"Created {record.full_title()}")
    console.print(f"  [cyan]File:[/cyan] {record.source_path}")
