"""Helpers shared by the acctmgr sub-commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from acctmgr.core.config import configure_logging, load_config
from acctmgr.storage import build_store

if TYPE_CHECKING:
    from acctmgr.core.models import Config
    from acctmgr.storage.adapter import StoreAdapter

CONFIG_HELP = "Config file path (default: nearest acctmgr.config.yaml)."


def load_cli_config(config_path: str | None) -> Config:
    """Load config for a command and apply its log level."""
    config = load_config(config_path=Path(config_path) if config_path else None)
    configure_logging(config)
    return config


def open_store(config_path: str | None) -> StoreAdapter:
    return build_store(load_cli_config(config_path))


def fail(error: Exception) -> typer.Exit:
    """Print ``Error: ...`` to stderr; the caller raises the returned Exit."""
    typer.echo(typer.style(f"Error: {error}", fg=typer.colors.RED), err=True)
    return typer.Exit(code=1)
