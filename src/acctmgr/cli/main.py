"""acctmgr CLI entry point.

    acctmgr start              interactive login / register / account session
    acctmgr users list         stored accounts
    acctmgr session show|clear persisted session
    acctmgr config show|path|set
"""

from __future__ import annotations

import typer

from acctmgr import __version__
from acctmgr.cli.commands.config_cmd import config_app
from acctmgr.cli.commands.session_cmd import session_app
from acctmgr.cli.commands.start_cmd import start_command
from acctmgr.cli.commands.users_cmd import users_app

app = typer.Typer(
    name="acctmgr",
    help="Local account manager: log in, register and edit your profile.",
    no_args_is_help=True,
)

app.command(name="start")(start_command)
for _group in (users_app, session_app, config_app):
    app.add_typer(_group)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"acctmgr {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Accounts and the session live in a local key-value store (see `config show`)."""
