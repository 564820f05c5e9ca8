"""Tests for acctmgr users / session commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from acctmgr.cli.main import app
from acctmgr.core.models import Session, UserRecord
from acctmgr.storage import JsonFileBackend, StoreAdapter

runner = CliRunner()


@pytest.fixture()
def file_store(tmp_path: Path) -> StoreAdapter:
    """Store at the default config location inside the test cwd."""
    return StoreAdapter(JsonFileBackend(tmp_path / ".acctmgr" / "storage.json"))


class TestUsersList:
    def test_empty(self) -> None:
        result = runner.invoke(app, ["users", "list"])
        assert result.exit_code == 0
        assert "No users registered." in result.output

    def test_passwords_masked(self, file_store: StoreAdapter) -> None:
        file_store.write_users(
            [
                UserRecord(name="Jane Doe", email="jane@x.com", password="abcd"),
                UserRecord(name="Bob", email="bob@y.org", password="secret99"),
            ]
        )
        result = runner.invoke(app, ["users", "list"])
        assert result.exit_code == 0
        assert "jane@x.com" in result.output
        assert "Bob" in result.output
        assert "secret99" not in result.output
        assert "********" in result.output
        assert "PASSWORD" in result.output
        assert "2 user(s)" in result.output

    def test_env_selects_store(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        other = tmp_path / "other.json"
        StoreAdapter(JsonFileBackend(other)).write_users(
            [UserRecord(name="Eve", email="eve@z.net", password="pass")]
        )
        monkeypatch.setenv("ACCTMGR_STORAGE__PATH", str(other))
        result = runner.invoke(app, ["users", "list"])
        assert "eve@z.net" in result.output


class TestSession:
    def test_show_anonymous(self) -> None:
        result = runner.invoke(app, ["session", "show"])
        assert result.exit_code == 0
        assert "Not logged in." in result.output

    def test_show_logged_in(self, file_store: StoreAdapter) -> None:
        file_store.write_users([UserRecord(name="Jane Doe", email="jane@x.com", password="abcd")])
        file_store.write_session(Session(email="jane@x.com"))
        result = runner.invoke(app, ["session", "show"])
        assert "Logged in as Jane Doe <jane@x.com>" in result.output

    def test_show_dangling(self, file_store: StoreAdapter) -> None:
        file_store.write_session(Session(email="ghost@x.com"))
        result = runner.invoke(app, ["session", "show"])
        assert "user record missing" in result.output

    def test_clear(self, file_store: StoreAdapter) -> None:
        file_store.write_session(Session(email="jane@x.com"))
        result = runner.invoke(app, ["session", "clear"])
        assert result.exit_code == 0
        assert "Session cleared." in result.output
        assert file_store.read_session() is None
