"""Account page: view and edit the logged-in user's profile."""

from __future__ import annotations

from typing import TYPE_CHECKING

from acctmgr.core.models import Element, Route
from acctmgr.pages.base import Action, BasePage
from acctmgr.ui.view import h

if TYPE_CHECKING:
    from acctmgr.pages.base import PageContext

MUST_LOG_IN = "You must be logged in to view this page."


class AccountPage(BasePage):
    """Profile form, pre-filled from the stored record.

    The record is looked up once per mount. A session pointing at a missing
    user shows the log-in fallback; the session itself is left alone.
    """

    route = Route.ACCOUNT
    field_names = ("name", "password")

    def __init__(self, ctx: PageContext) -> None:
        super().__init__(ctx)
        user = ctx.machine.current_user()
        self.email = user.email if user is not None else ""
        self.has_profile = user is not None
        if user is not None:
            self.fields = {"name": user.name, "password": user.password}

    @property
    def editable_fields(self) -> tuple[str, ...]:
        return tuple(self.fields) if self.has_profile else ()

    def actions(self) -> dict[str, Action]:
        if not self.has_profile or self.ctx.machine.session is None:
            return {"go-login": self.navigate_to(Route.LOGIN)}
        return {"submit": self.save, "logout": self.logout}

    async def save(self) -> None:
        self.error = ""
        self.success = ""
        result = self.ctx.machine.update_profile(self.fields["name"], self.fields["password"])
        if result.ok:
            self.success = result.message
        else:
            self.error = result.message

    async def logout(self) -> None:
        self.ctx.on_logout()

    def render(self) -> Element:
        if not self.has_profile or self.ctx.machine.session is None:
            return h(
                "div",
                {"class": "card"},
                self.header(),
                h("div", {"class": "error"}, MUST_LOG_IN),
                h(
                    "div",
                    {"class": "actions"},
                    h("button", {"action": "go-login"}, "Go to login"),
                ),
            )

        return h(
            "div",
            {"class": "card"},
            self.header(),
            h("h2", None, "My Account"),
            h(
                "form",
                {"action": "submit"},
                h("input", {"name": "email", "label": "Email", "value": self.email, "disabled": True}),
                self.field_input("name", "Full name"),
                self.field_input("password", "Password", "password"),
                h(
                    "div",
                    {"class": "actions"},
                    h("button", {"action": "submit", "class": "primary"}, "Save changes"),
                    h("button", {"action": "logout", "class": "danger"}, "Log out"),
                ),
                self.messages(),
            ),
        )
