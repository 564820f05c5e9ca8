"""acctmgr users — inspect stored accounts."""

from __future__ import annotations

import typer

from acctmgr.cli.common import CONFIG_HELP, fail, open_store
from acctmgr.core.exceptions import AcctMgrError

users_app = typer.Typer(
    name="users",
    help="Stored account commands.",
    no_args_is_help=True,
)


@users_app.command(name="list")
def users_list(
    config_path: str | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """List registered users with their passwords masked."""
    try:
        users = open_store(config_path).read_users()
    except AcctMgrError as e:
        raise fail(e) from None

    if not users:
        typer.echo("No users registered.")
        return

    rows = [(u.email, u.name, "*" * len(u.password)) for u in users]
    email_w = max(len("EMAIL"), *(len(r[0]) for r in rows))
    name_w = max(len("NAME"), *(len(r[1]) for r in rows))
    typer.echo(f"{'EMAIL'.ljust(email_w)}  {'NAME'.ljust(name_w)}  PASSWORD")
    for email, name, masked in rows:
        typer.echo(f"{email.ljust(email_w)}  {name.ljust(name_w)}  {masked}")
    typer.echo(f"\n{len(users)} user(s)")
