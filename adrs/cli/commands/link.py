"""Link two records."""

import cyclopts

from adrs.cli.console import get_console
from adrs.cli.util import fail, open_service
from adrs.domain.record.model import LinkKind
from adrs.domain.shared.error import AdrsError

app = cyclopts.App(name="link", help="Link two records in both directions")


@app.default
def link(source: int, kind: str, target: int, reverse: str, /) -> None:
    """Link SOURCE to TARGET with KIND, and TARGET back to SOURCE with REVERSE.

    Args:
        source: Number of the linking record.
        kind: Link kind on the source, e.g. 'Amends'.
        target: Number of the linked record.
        reverse: Link kind on the target, e.g. 'Amended by'.
    """
    try:
        source_record, target_record = open_service().link(
            source, target, LinkKind(kind), LinkKind(reverse)
        )
    except AdrsError as e:
        fail(e)

    get_console().success(
        f"Linked {source_record.full_title()} {LinkKind(kind)} {target_record.full_title()}"
    )
