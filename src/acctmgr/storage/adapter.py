"""StoreAdapter — typed access to the two logical records.

Keys and value shapes are shared with the browser version of the app:
    app.users    JSON array of {name, email, password}
    app.session  JSON object {email}, absent when logged out

Reads never raise: absent, unparsable or wrongly shaped data comes back as
an empty default and is logged.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from acctmgr.core.models import Session, UserRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from acctmgr.storage.base import KeyValueBackend

logger = logging.getLogger(__name__)

STORAGE_KEYS: dict[str, str] = {
    "users": "app.users",
    "session": "app.session",
}


class StoreAdapter:
    """Serializes users and session into a KeyValueBackend."""

    def __init__(self, backend: KeyValueBackend) -> None:
        self._backend = backend

    @property
    def backend(self) -> KeyValueBackend:
        return self._backend

    def read_users(self) -> list[UserRecord]:
        """Return every stored user, or [] if the record is missing or malformed."""
        users: list[UserRecord] = []
        for index, item in enumerate(self._raw_users()):
            user = _to_user(item)
            if user is None:
                logger.warning("Skipping malformed user entry at index %d", index)
            else:
                users.append(user)
        return users

    def write_users(self, users: Iterable[UserRecord]) -> None:
        """Replace the stored users.

        Entries that read_users skipped stay in place: each keeps its position
        and the given users fill the remaining slots in order, extra ones are
        appended.
        """
        incoming = iter(users)
        payload: list[object] = []
        for item in self._raw_users():
            if _to_user(item) is None:
                payload.append(item)
                continue
            user = next(incoming, None)
            if user is not None:
                payload.append(user.model_dump())
        payload.extend(user.model_dump() for user in incoming)
        self._backend.set_item(STORAGE_KEYS["users"], _dumps(payload))

    def read_session(self) -> Session | None:
        data = self._read_json(STORAGE_KEYS["session"])
        if data is None:
            return None
        try:
            return Session.model_validate(data)
        except ValidationError:
            logger.warning("Ignoring malformed session record")
            return None

    def write_session(self, session: Session | None) -> None:
        """Persist session; None removes the record."""
        if session is None:
            self._backend.remove_item(STORAGE_KEYS["session"])
        else:
            self._backend.set_item(STORAGE_KEYS["session"], _dumps(session.model_dump()))

    def _raw_users(self) -> list[object]:
        data = self._read_json(STORAGE_KEYS["users"])
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Stored users is %s, expected a list", type(data).__name__)
            return []
        return data

    def _read_json(self, key: str) -> object | None:
        raw = self._backend.get_item(key)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring unparsable value under %s", key)
            return None


def _to_user(item: object) -> UserRecord | None:
    try:
        return UserRecord.model_validate(item)
    except ValidationError:
        return None


def _dumps(data: object) -> str:
    # Same text JSON.stringify produces: no spaces, non-ASCII kept as is.
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
