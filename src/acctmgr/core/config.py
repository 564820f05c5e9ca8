"""acctmgr configuration — discovery, layered loading, dotted-key edits.

Layers (later wins):
    1. Model defaults
    2. acctmgr.config.yaml (cwd, a parent, or their .acctmgr/ directory)
    3. ACCTMGR_* environment variables (__ separates nested keys)
    4. Overrides passed by the caller (CLI flags, ``config set``)
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from acctmgr.core.exceptions import ConfigError
from acctmgr.core.models import Config

DEFAULT_CONFIG_FILENAME = "acctmgr.config.yaml"
CONFIG_DIRNAME = ".acctmgr"
ENV_PREFIX = "ACCTMGR_"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_config(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Config:
    """Build a validated Config from every layer.

    Args:
        config_path: YAML file to read. If None, the nearest discovered file is
            used. A path that does not exist contributes nothing.
        overrides: Nested dict merged on top of everything else.

    Raises:
        ConfigError: Unreadable YAML, or a merged value the models reject.
    """
    if config_path is None:
        config_path = find_config_file()

    layers: list[dict[str, Any]] = [_collect_env_vars(), overrides or {}]
    if config_path is not None and config_path.exists():
        layers.insert(0, _load_yaml(config_path))

    merged: dict[str, Any] = {}
    for layer in layers:
        merged = _deep_merge(merged, layer)

    # Passed as init kwargs, which BaseSettings ranks above its own env lookup.
    try:
        return Config(**merged)
    except ValidationError as e:
        msg = f"Config validation failed: {_describe(e)}"
        raise ConfigError(msg) from e


def save_config(config: Config, path: Path) -> None:
    """Write Config to a YAML file, creating parent directories."""
    data = config.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:  # noqa: PTH123
        yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)


def set_config_value(path: Path, key: str, value: str) -> Config:
    """Validate ``key=value`` against the models and persist it to ``path``.

    The file is only written once the resulting Config validates.

    Raises:
        ConfigError: Unknown key, a value outside an enum's choices, or any
            other value the models reject.
    """
    keys = config_keys()
    if key not in keys:
        msg = f"Unknown config key '{key}'. Known keys: {', '.join(keys)}"
        raise ConfigError(msg)

    annotation = keys[key]
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        choices = [str(member.value) for member in annotation]
        if value not in choices:
            msg = f"{key} must be one of: {', '.join(choices)} (got '{value}')"
            raise ConfigError(msg)

    config = load_config(config_path=path, overrides=_dotted_key_to_dict(key, value))
    save_config(config, path)
    return config


def config_keys(model: type[BaseModel] = Config, prefix: str = "") -> dict[str, Any]:
    """Map every settable dotted key to its field annotation."""
    keys: dict[str, Any] = {}
    for name, field in model.model_fields.items():
        annotation = field.annotation
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            keys.update(config_keys(annotation, f"{prefix}{name}."))
        else:
            keys[f"{prefix}{name}"] = annotation
    return keys


def configure_logging(config: Config) -> None:
    """Apply Config.log_level to the root logger. Unknown levels mean WARNING."""
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def find_config_file(start: Path | None = None) -> Path | None:
    """Nearest config file walking up from ``start`` (default: cwd)."""
    current = start or Path.cwd()
    for directory in [current, *current.parents]:
        for candidate in (
            directory / DEFAULT_CONFIG_FILENAME,
            directory / CONFIG_DIRNAME / DEFAULT_CONFIG_FILENAME,
        ):
            if candidate.exists():
                return candidate
    return None


def default_config_path() -> Path:
    """File that edits go to: the discovered one, else a new one in cwd."""
    return find_config_file() or Path.cwd() / DEFAULT_CONFIG_FILENAME


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:  # noqa: PTH123
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Failed to parse YAML: {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read config: {path}: {e}"
        raise ConfigError(msg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must be a YAML mapping, got {type(data).__name__}: {path}"
        raise ConfigError(msg)
    return data


def _collect_env_vars() -> dict[str, Any]:
    """ACCTMGR_UI__COLOR=0 -> {"ui": {"color": "0"}}."""
    result: dict[str, Any] = {}
    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX):
            path = key[len(ENV_PREFIX) :].lower().split("__")
            _deep_set(result, path, value)
    return result


def _dotted_key_to_dict(key: str, value: str) -> dict[str, Any]:
    result: dict[str, Any] = {}
    _deep_set(result, key.split("."), value)
    return result


def _deep_set(target: dict[str, Any], path: list[str], value: Any) -> None:
    for part in path[:-1]:
        if not isinstance(target.get(part), dict):
            target[part] = {}
        target = target[part]
    target[path[-1]] = value


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base. Override wins on conflicts."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )
