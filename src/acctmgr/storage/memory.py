"""MemoryBackend — dict-backed store, lost when the process exits."""

from __future__ import annotations

from acctmgr.storage.base import KeyValueBackend


class MemoryBackend(KeyValueBackend):
    """In-process key-value store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    @property
    def backend_name(self) -> str:
        return "memory"

    def snapshot(self) -> dict[str, str]:
        """Copy of the raw stored strings."""
        return dict(self._data)
