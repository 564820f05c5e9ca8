"""acctmgr session — inspect or clear the persisted session."""

from __future__ import annotations

import typer

from acctmgr.auth.session import SessionMachine
from acctmgr.cli.common import CONFIG_HELP, fail, open_store
from acctmgr.core.exceptions import AcctMgrError

session_app = typer.Typer(
    name="session",
    help="Session commands.",
    no_args_is_help=True,
)


@session_app.command(name="show")
def session_show(
    config_path: str | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Show who is logged in."""
    try:
        machine = SessionMachine(open_store(config_path), login_delay_ms=0)
        session = machine.session
        user = machine.current_user()
    except AcctMgrError as e:
        raise fail(e) from None

    if session is None:
        typer.echo("Not logged in.")
        return
    if user is None:
        typer.echo(
            typer.style(
                f"Session for {session.email} (user record missing)", fg=typer.colors.YELLOW
            )
        )
        return
    typer.echo(f"Logged in as {user.name} <{user.email}>")


@session_app.command(name="clear")
def session_clear(
    config_path: str | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Log out (remove the persisted session)."""
    try:
        SessionMachine(open_store(config_path), login_delay_ms=0).logout()
    except AcctMgrError as e:
        raise fail(e) from None
    typer.echo("Session cleared.")
