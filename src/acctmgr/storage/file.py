"""JsonFileBackend — one JSON object file holding every key.

The file maps keys to their raw string values, exactly like the browser
storage it stands in for. Writes go through a temp file + replace so a
crash never leaves a half-written file behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from acctmgr.core.exceptions import StorageError
from acctmgr.storage.base import KeyValueBackend

logger = logging.getLogger(__name__)


class JsonFileBackend(KeyValueBackend):
    """File-backed key-value store."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backend_name(self) -> str:
        return "file"

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)

    def _load(self) -> dict[str, str]:
        """Read the whole file. Missing or corrupt files read as empty."""
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8")
            data = json.loads(raw) if raw.strip() else {}
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable store file %s: %s", self._path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring store file %s: not a JSON object", self._path)
            return {}

        items: dict[str, str] = {}
        for key, value in data.items():
            if isinstance(value, str):
                items[str(key)] = value
            else:
                logger.warning(
                    "Dropping key %r from %s: value is %s, expected a string",
                    key,
                    self._path,
                    type(value).__name__,
                )
        return items

    def _dump(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            msg = f"Failed to write store file: {self._path}: {e}"
            raise StorageError(msg) from e
