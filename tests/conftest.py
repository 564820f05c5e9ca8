"""Shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path  # noqa: TC003

import pytest

from acctmgr.app import AppController, build_app
from acctmgr.auth.session import SessionMachine
from acctmgr.core.models import Config, UserRecord
from acctmgr.storage import MemoryBackend, StoreAdapter
from acctmgr.ui import BufferHost


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in its own cwd with no ACCTMGR_ variables set."""
    for key in list(os.environ):
        if key.startswith("ACCTMGR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture()
def store(backend: MemoryBackend) -> StoreAdapter:
    return StoreAdapter(backend)


@pytest.fixture()
def jane_store(store: StoreAdapter) -> StoreAdapter:
    store.write_users([UserRecord(name="Jane Doe", email="jane@x.com", password="abcd")])
    return store


@pytest.fixture()
def machine(jane_store: StoreAdapter) -> SessionMachine:
    return SessionMachine(jane_store, login_delay_ms=0)


MakeApp = Callable[..., AppController]


@pytest.fixture()
def make_app(jane_store: StoreAdapter) -> MakeApp:
    """Build a started controller over the Jane store with a BufferHost."""

    def _make(
        fragment: str = "", delay_ms: int = 0, store: StoreAdapter | None = None
    ) -> AppController:
        config = Config(storage={"backend": "memory"}, ui={"login_delay_ms": delay_ms})
        app = build_app(config, BufferHost(), store=store or jane_store, fragment=fragment)
        app.start()
        return app

    return _make
