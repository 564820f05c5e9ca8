"""Key-value backend registry."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from acctmgr.storage.adapter import STORAGE_KEYS, StoreAdapter
from acctmgr.storage.base import KeyValueBackend
from acctmgr.storage.file import JsonFileBackend
from acctmgr.storage.memory import MemoryBackend

if TYPE_CHECKING:
    from acctmgr.core.models import Config

BACKEND_REGISTRY: dict[str, type[KeyValueBackend]] = {
    "memory": MemoryBackend,
    "file": JsonFileBackend,
}


def build_store(config: Config) -> StoreAdapter:
    """Create the StoreAdapter selected by config.storage."""
    backend_cls = BACKEND_REGISTRY[config.storage.backend]
    if backend_cls is JsonFileBackend:
        return StoreAdapter(JsonFileBackend(Path(config.storage.path)))
    return StoreAdapter(backend_cls())


__all__ = [
    "BACKEND_REGISTRY",
    "JsonFileBackend",
    "KeyValueBackend",
    "MemoryBackend",
    "STORAGE_KEYS",
    "StoreAdapter",
    "build_store",
]
