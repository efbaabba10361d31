"""Main CLI application using Cyclopts.

Each command opens the collection itself; there is no long-lived state
between invocations.
"""

import cyclopts

from adrs.cli.commands import config, doctor, init, link, new, show, status
from adrs.cli.commands import list as list_
from adrs.config import Config, configure_logging

app = cyclopts.App(
    name="adrs",
    help="Manage architecture decision records",
)

app.command(init.app, name="init")
app.command(new.app, name="new")
app.command(list_.app, name="list")
app.command(show.app, name="show")
app.command(link.app, name="link")
app.command(status.app, name="status")
app.command(doctor.app, name="doctor")
app.command(config.app, name="config")


def main() -> None:
    configure_logging(Config().logging)
    app()
