"""acctmgr data models — Pydantic v2.

This module is a leaf: no internal project imports.
All Enum and Model definitions live here.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ============================================================
# Enums
# ============================================================


class Route(StrEnum):
    """Logical page identifier derived from the location fragment."""

    LOGIN = "login"
    REGISTER = "register"
    ACCOUNT = "account"
    NOT_FOUND = "not-found"


class AuthState(StrEnum):
    """Session state machine state."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class StorageBackend(StrEnum):
    """Key-value backend type."""

    MEMORY = "memory"
    FILE = "file"


# Fragment constants for the three known routes.
ROUTE_FRAGMENTS: dict[Route, str] = {
    Route.LOGIN: "#/login",
    Route.REGISTER: "#/register",
    Route.ACCOUNT: "#/account",
}

DEFAULT_FRAGMENT = ROUTE_FRAGMENTS[Route.LOGIN]


# ============================================================
# Config Models
# ============================================================


class StorageConfig(BaseModel):
    """Key-value store configuration."""

    backend: StorageBackend = Field(default=StorageBackend.FILE)
    path: str = Field(
        default=".acctmgr/storage.json",
        description="JSON file used by the 'file' backend",
    )


class UIConfig(BaseModel):
    """Interactive UI configuration."""

    login_delay_ms: int = Field(default=300, ge=0, le=5000)
    color: bool = Field(default=True)


class Config(BaseSettings):
    """Project configuration. Merged from YAML + env var + CLI flag."""

    model_config = SettingsConfigDict(
        env_prefix="ACCTMGR_",
        env_nested_delimiter="__",
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    log_level: str = Field(default="WARNING")


# ============================================================
# Account Models
# ============================================================


class UserRecord(BaseModel):
    """A single registered account. Email is the unique key (lowercased)."""

    # Unknown keys written by other clients survive a read/write cycle.
    model_config = ConfigDict(extra="allow")

    name: str
    email: str
    password: str


class Session(BaseModel):
    """Which user, if any, is currently authenticated."""

    email: str


class ActionResult(BaseModel):
    """Outcome of a state transition. Failures carry a display message."""

    ok: bool
    message: str = ""

    @classmethod
    def success(cls, message: str = "") -> ActionResult:
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, message: str) -> ActionResult:
        return cls(ok=False, message=message)


# ============================================================
# View Models
# ============================================================


class Element(BaseModel):
    """One node of a rendered view tree.

    Pure data: buttons and forms reference page actions by name instead of
    holding callbacks, so a tree can be compared, dumped or re-rendered.
    """

    model_config = ConfigDict(frozen=True)

    tag: str
    props: dict[str, Any] = Field(default_factory=dict)
    children: list[Element | str] = Field(default_factory=list)


Element.model_rebuild()
