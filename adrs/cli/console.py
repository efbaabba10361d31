"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from adrs.domain.doctor.model import Diagnostic, Severity
from adrs.domain.record.model import Record

SEVERITY_STYLES = {
    Severity.ERROR: ("red", "\u2717"),
    Severity.WARNING: ("yellow", "\u26a0"),
    Severity.INFO: ("blue", "\u2139"),
}


class Console:
    """CLI output manager wrapping rich.

    Regular output goes to stdout, errors to stderr.
    """

    def __init__(
        self,
        *,
        force_terminal: bool | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the console.

        Args:
            force_terminal: Force terminal mode (True/False) or auto-detect (None).
            quiet: Suppress non-essential output.
        """
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)
        self._quiet = quiet

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        self._console.print(f"[green]\u2713[/green] {escape(message)}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]\u2717[/red] {escape(message)}")
        if hint:
            self._err_console.print(f"  [dim]{escape(hint)}[/dim]")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]\u26a0[/yellow] {escape(message)}")

    def info(self, message: str) -> None:
        """Print an info message (suppressed in quiet mode)."""
        if not self._quiet:
            self._console.print(f"[dim]{escape(message)}[/dim]")

    # -------------------------------------------------------------------------
    # Structured output
    # -------------------------------------------------------------------------

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console (pass-through to rich)."""
        self._console.print(*args, **kwargs)

    def table(
        self,
        rows: list[dict[str, Any]],
        columns: list[tuple[str, str]],  # (key, header)
        *,
        title: str | None = None,
    ) -> None:
        table = Table(title=title, show_header=True, header_style="bold")
        for _, header in columns:
            table.add_column(header)
        for row in rows:
            table.add_row(*(escape(str(row.get(key, ""))) for key, _ in columns))
        self._console.print(table)

    def record_detail(self, record: Record) -> None:
        """Print a record's metadata and body in a panel."""
        lines = [
            f"[cyan]Status:[/cyan] {escape(str(record.status))}    "
            f"[cyan]Date:[/cyan] {record.date.isoformat()}"
        ]
        lines.extend(f"[cyan]{escape(str(link.kind))}:[/cyan] {link.target}" for link in record.links)
        for heading, text in (
            ("Context", record.context),
            ("Decision", record.decision),
            ("Consequences", record.consequences),
        ):
            if text:
                lines.extend(["", f"[bold]{heading}[/bold]", escape(text)])

        subtitle = f"[dim]{escape(str(record.source_path))}[/dim]" if record.source_path else None
        self._console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold]{escape(record.full_title())}[/bold]",
                subtitle=subtitle,
                border_style="blue",
                padding=(1, 2),
            )
        )

    def diagnostic(self, diagnostic: Diagnostic) -> None:
        style, icon = SEVERITY_STYLES[diagnostic.severity]
        self._console.print(
            f"[{style}]{icon}[/{style}] [dim]{diagnostic.check}[/dim] {escape(diagnostic.message)}"
        )


# Default console instance
_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
