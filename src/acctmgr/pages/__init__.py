"""Page registry."""

from __future__ import annotations

from acctmgr.core.models import Route
from acctmgr.pages.account import AccountPage
from acctmgr.pages.base import BasePage, PageContext
from acctmgr.pages.login import LoginPage
from acctmgr.pages.not_found import NotFoundPage
from acctmgr.pages.register import RegisterPage

PAGE_REGISTRY: dict[Route, type[BasePage]] = {
    Route.LOGIN: LoginPage,
    Route.REGISTER: RegisterPage,
    Route.ACCOUNT: AccountPage,
    Route.NOT_FOUND: NotFoundPage,
}

__all__ = [
    "PAGE_REGISTRY",
    "AccountPage",
    "BasePage",
    "LoginPage",
    "NotFoundPage",
    "PageContext",
    "RegisterPage",
]
