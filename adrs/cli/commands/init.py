"""Create a new record collection."""

from pathlib import Path

import cyclopts

from adrs.cli.console import get_console
from adrs.cli.util import fail
from adrs.config import DEFAULT_ADR_DIR, Config
from adrs.domain.record.render import Mode
from adrs.domain.shared.error import AdrsError
from adrs.infrastructure.persistence.repository.record import FileRecordRepository

app = cyclopts.App(name="init", help="Create a record directory and its first record")


@app.default
def init(directory: Path | None = None, /, *, ng: bool = False) -> None:
    """Create a record directory in the current project.

    Writes the project settings and record 1, which records the decision
    to keep decision records.

    Args:
        directory: Record directory, relative to the current directory. Defaults to doc/adr.
        ng: Write records with YAML metadata instead of the adr-tools layout.
    """
    console = get_console()
    mode = Mode.NG if ng else Mode.COMPATIBLE
    directory = directory or Config().dir or DEFAULT_ADR_DIR

    try:
        repo = FileRecordRepository.init(Path.cwd(), directory, mode)
        first = repo.get(1)
    except AdrsError as e:
        fail(e)

    console.success(f"Initialised record directory {repo.directory} ({mode} mode)")
    console.print(f"  [cyan]Created:[/cyan] {first.source_path}")
