"""acctmgr config — inspect and edit acctmgr.config.yaml."""

from __future__ import annotations

from pathlib import Path

import typer
import yaml

from acctmgr.cli.common import CONFIG_HELP, fail
from acctmgr.core.config import (
    config_keys,
    default_config_path,
    find_config_file,
    load_config,
    set_config_value,
)
from acctmgr.core.exceptions import ConfigError

config_app = typer.Typer(
    name="config",
    help="Show or edit the storage, UI and logging settings.",
    no_args_is_help=True,
)


@config_app.command(name="show")
def config_show(
    config_path: str | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Print the effective configuration (file, env and defaults merged)."""
    try:
        config = load_config(config_path=Path(config_path) if config_path else None)
    except ConfigError as e:
        raise fail(e) from None
    data = config.model_dump(mode="json")
    typer.echo(yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False))


@config_app.command(name="path")
def config_path_cmd() -> None:
    """Print which config file is in use."""
    found = find_config_file()
    if found is None:
        typer.echo(f"No config file; defaults apply. `config set` creates {default_config_path()}")
        return
    typer.echo(str(found))


@config_app.command(name="set")
def config_set(
    key: str = typer.Argument(help=f"Dotted key, one of: {', '.join(config_keys())}."),
    value: str = typer.Argument(help="New value."),
    config_path: str | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Validate and store one setting, e.g. `config set storage.backend memory`."""
    path = Path(config_path) if config_path else default_config_path()
    try:
        set_config_value(path, key, value)
    except ConfigError as e:
        raise fail(e) from None
    typer.echo(f"Set {key} = {value} in {path}")
