"""Show the resolved configuration."""

import cyclopts

from adrs.cli.console import get_console
from adrs.cli.util import fail, resolve_project
from adrs.domain.shared.error import AdrsError

app = cyclopts.App(name="config", help="Show which settings are in use and where they came from")


@app.default
def config() -> None:
    """Print the record directory, mode and settings source."""
    try:
        resolved = resolve_project()
    except AdrsError as e:
        fail(e)

    console = get_console()
    console.print(f"[cyan]Directory:[/cyan] {resolved.directory}")
    console.print(f"[cyan]Mode:[/cyan]      {resolved.mode}")
    console.print(f"[cyan]Source:[/cyan]    {resolved.source}")
    if resolved.path is not None:
        console.print(f"[cyan]File:[/cyan]      {resolved.path}")
    if resolved.directory_overridden:
        console.info("Directory overridden by ADRS_DIR")
