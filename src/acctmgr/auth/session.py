"""SessionMachine — Anonymous / Authenticated(email) state machine.

Owns the in-memory session mirror and routes every account mutation through
the StoreAdapter. Transitions report their outcome as ActionResult; a failed
validation leaves both the store and the state untouched.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from acctmgr.auth import validation as v
from acctmgr.core.models import ActionResult, AuthState, Session, UserRecord

if TYPE_CHECKING:
    from acctmgr.storage.adapter import StoreAdapter

logger = logging.getLogger(__name__)

REGISTERED = "Registration successful. You can now log in."
ACCOUNT_UPDATED = "Account updated."


class SessionMachine:
    """Login, registration, profile update and logout over one store.

    Args:
        store: StoreAdapter holding users and the persisted session.
        login_delay_ms: Cosmetic pause before a login lookup resolves.
    """

    def __init__(self, store: StoreAdapter, login_delay_ms: int = 300) -> None:
        self._store = store
        self._login_delay = login_delay_ms / 1000
        self._session: Session | None = store.read_session()
        self._pending_login: asyncio.Task[ActionResult] | None = None

    @property
    def store(self) -> StoreAdapter:
        return self._store

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def state(self) -> AuthState:
        return AuthState.ANONYMOUS if self._session is None else AuthState.AUTHENTICATED

    @property
    def login_pending(self) -> bool:
        return self._pending_login is not None and not self._pending_login.done()

    def current_user(self) -> UserRecord | None:
        """The stored record the session points at, or None.

        A session whose user no longer exists is kept as-is; callers decide
        how to present it.
        """
        if self._session is None:
            return None
        return _find_user(self._store.read_users(), self._session.email)

    # -- Transitions ---------------------------------------------------------

    async def login(self, email: str, password: str) -> ActionResult:
        """Authenticate against stored users (normalized email, trimmed password)."""
        e_mail = v.normalize_email(email)
        secret = v.safe_trim(password)
        if not v.is_valid_email(e_mail):
            return ActionResult.failure(v.INVALID_EMAIL)
        if not v.is_valid_password(secret):
            return ActionResult.failure(v.PASSWORD_TOO_SHORT)

        if self._login_delay > 0:
            await asyncio.sleep(self._login_delay)

        user = next(
            (u for u in self._store.read_users() if u.email == e_mail and u.password == secret),
            None,
        )
        if user is None:
            logger.info("Login failed for %s", e_mail)
            return ActionResult.failure(v.INVALID_CREDENTIALS)

        self._session = Session(email=user.email)
        self._store.write_session(self._session)
        logger.info("Logged in as %s", user.email)
        return ActionResult.success()

    def submit_login(self, email: str, password: str) -> asyncio.Task[ActionResult]:
        """Start a login task, cancelling any still-pending earlier submission.

        Must be called from a running event loop.
        """
        pending = self._pending_login
        if pending is not None and not pending.done():
            logger.debug("Cancelling superseded login attempt")
            pending.cancel()
        task = asyncio.get_running_loop().create_task(self.login(email, password))
        self._pending_login = task
        return task

    def register(self, name: str, email: str, password: str, confirm: str) -> ActionResult:
        """Create a user. Rules run name, email, password, confirm, uniqueness."""
        full_name = v.safe_trim(name)
        e_mail = v.normalize_email(email)
        secret = v.safe_trim(password)

        if not v.is_valid_name(full_name):
            return ActionResult.failure(v.NAME_TOO_SHORT)
        if not v.is_valid_email(e_mail):
            return ActionResult.failure(v.INVALID_EMAIL)
        if not v.is_valid_password(secret):
            return ActionResult.failure(v.PASSWORD_TOO_SHORT)
        if not v.passwords_match(secret, confirm):
            return ActionResult.failure(v.PASSWORD_MISMATCH)

        users = self._store.read_users()
        if _find_user(users, e_mail) is not None:
            return ActionResult.failure(v.DUPLICATE_EMAIL)

        users.append(UserRecord(name=full_name, email=e_mail, password=secret))
        self._store.write_users(users)
        logger.info("Registered %s", e_mail)
        return ActionResult.success(REGISTERED)

    def update_profile(self, name: str, password: str) -> ActionResult:
        """Overwrite name and password of the session's user. Email never changes."""
        full_name = v.safe_trim(name)
        secret = v.safe_trim(password)
        if not v.is_valid_name(full_name):
            return ActionResult.failure(v.NAME_TOO_SHORT)
        if not v.is_valid_password(secret):
            return ActionResult.failure(v.PASSWORD_TOO_SHORT)

        users = self._store.read_users()
        index = -1
        if self._session is not None:
            index = next(
                (i for i, u in enumerate(users) if u.email == self._session.email),
                -1,
            )
        if index == -1:
            return ActionResult.failure(v.USER_NOT_FOUND)

        users[index] = users[index].model_copy(update={"name": full_name, "password": secret})
        self._store.write_users(users)
        logger.info("Updated profile for %s", users[index].email)
        return ActionResult.success(ACCOUNT_UPDATED)

    def logout(self) -> None:
        if self._session is not None:
            logger.info("Logged out %s", self._session.email)
        self._session = None
        self._store.write_session(None)


def _find_user(users: list[UserRecord], email: str) -> UserRecord | None:
    return next((u for u in users if u.email == email), None)
