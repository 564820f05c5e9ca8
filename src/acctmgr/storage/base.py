"""KeyValueBackend ABC — persistent string key-value store interface.

MemoryBackend and JsonFileBackend implement this. The interface mirrors
browser local storage: string keys, string values, missing keys read as None.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueBackend(ABC):
    """Persistent key-value store abstract interface."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any prior value."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete key. Missing keys are ignored."""
        ...

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Backend name: 'memory', 'file'."""
        ...
