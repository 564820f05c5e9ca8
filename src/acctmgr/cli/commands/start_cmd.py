"""acctmgr start — interactive terminal session.

The terminal is the rendering host: every page change re-prints the page,
and each input line is either a field assignment or a colon command.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING

import typer

from acctmgr.app import build_app
from acctmgr.cli.common import CONFIG_HELP, load_cli_config
from acctmgr.core.exceptions import AcctMgrError, CommandError
from acctmgr.routing.router import fragment_for
from acctmgr.ui.host import TerminalHost
from acctmgr.ui.view import find_all

if TYPE_CHECKING:
    from acctmgr.app import AppController
    from acctmgr.core.models import Config

# prompt(label, secret) -> typed value
Prompt = Callable[[str, bool], str]

HELP = """\
Commands:
  field=value     set a form field (e.g. email=jane@x.com)
  :fill           prompt for every editable field
  :submit         submit the current form
  :click ACTION   press a button, e.g. :click logout
  :go ROUTE       navigate (login, register, account or #/fragment)
  :help           show this help
  :quit           leave"""


def start_command(
    config_path: str | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    route: str | None = typer.Option(None, "--route", "-r", help="Initial route."),
) -> None:
    """Interactive session: login, register and edit your account."""
    try:
        config = load_cli_config(config_path)
        asyncio.run(_interactive(config, route))
    except (KeyboardInterrupt, typer.Abort):
        typer.echo("\nAborted.")
        raise typer.Exit(code=130) from None
    except AcctMgrError as e:
        typer.echo(typer.style(f"\nError: {e}", fg=typer.colors.RED), err=True)
        raise typer.Exit(code=1) from None


async def _interactive(config: Config, route: str | None) -> None:
    host = TerminalHost(color=config.ui.color)
    app = build_app(config, host, fragment=fragment_for(route) if route else "")
    app.start()
    await app.settle()
    host.notice("Type :help for commands.")

    try:
        while True:
            line = typer.prompt("", default="", show_default=False, prompt_suffix="> ")
            try:
                if not await run_line(app, line, _terminal_prompt):
                    break
            except CommandError as e:
                host.notice(typer.style(f"  [ERROR] {e}", fg=typer.colors.RED))
    finally:
        app.stop()


async def run_line(app: AppController, line: str, prompt: Prompt) -> bool:
    """Execute one input line. Returns False when the session should end.

    Raises:
        CommandError: Unknown command, field or action.
    """
    text = line.strip()
    if not text:
        app.refresh()
        return True

    if not text.startswith(":"):
        name, sep, value = text.partition("=")
        if not sep:
            msg = f"Expected field=value or a :command, got '{text}'"
            raise CommandError(msg)
        app.set_field(name.strip(), value)
        app.refresh()
        return True

    command, _, arg = text[1:].partition(" ")
    arg = arg.strip()
    if command in ("quit", "q", "exit"):
        return False
    if command == "help":
        app.host.notice(HELP)
    elif command == "go":
        if not arg:
            msg = "Usage: :go ROUTE"
            raise CommandError(msg)
        app.navigate(arg)
        await app.settle()
    elif command == "submit":
        await app.dispatch("submit")
    elif command == "click":
        if not arg:
            msg = "Usage: :click ACTION"
            raise CommandError(msg)
        await app.dispatch(arg)
    elif command == "fill":
        _fill(app, prompt)
        app.refresh()
    else:
        msg = f"Unknown command ':{command}'. Type :help"
        raise CommandError(msg)
    return True


def _fill(app: AppController, prompt: Prompt) -> None:
    """Prompt for each editable input of the mounted page, in screen order."""
    page = app.page
    if page is None:
        return
    for node in find_all(page.render(), tag="input"):
        name = str(node.props.get("name", ""))
        if node.props.get("disabled") or name not in page.editable_fields:
            continue
        label = str(node.props.get("label", name))
        app.set_field(name, prompt(label, node.props.get("type") == "password"))


def _terminal_prompt(label: str, secret: bool) -> str:
    value: str = typer.prompt(label, default="", show_default=False, hide_input=secret)
    return value
