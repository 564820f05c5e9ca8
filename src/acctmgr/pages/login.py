"""Login page."""

from __future__ import annotations

import asyncio

from acctmgr.core.models import Element, Route
from acctmgr.pages.base import Action, BasePage, PageContext
from acctmgr.ui.view import h

FOOTER = "Demo app. Data is stored locally only."


class LoginPage(BasePage):
    route = Route.LOGIN
    field_names = ("email", "password")

    def __init__(self, ctx: PageContext) -> None:
        super().__init__(ctx)
        self.is_loading = False

    def actions(self) -> dict[str, Action]:
        return {
            "submit": self.submit,
            "create-account": self.navigate_to(Route.REGISTER),
        }

    async def submit(self) -> None:
        self.error = ""
        self.is_loading = True
        self.ctx.refresh()

        task = self.ctx.machine.submit_login(self.fields["email"], self.fields["password"])
        await asyncio.wait({task})
        if task.cancelled():
            return

        result = task.result()
        self.is_loading = False
        if not result.ok:
            self.error = result.message
            self.ctx.refresh()
            return
        self.ctx.on_login()

    def render(self) -> Element:
        return h(
            "div",
            {"class": "card"},
            self.header(),
            h("h2", None, "Login"),
            h("div", {"class": "error"}, self.error) if self.error else None,
            h(
                "form",
                {"action": "submit"},
                self.field_input("email", "Email", "email", placeholder="you@example.com"),
                self.field_input("password", "Password", "password", placeholder="••••"),
                h(
                    "div",
                    {"class": "actions"},
                    h("button", {"action": "create-account", "class": "link"}, "Create account"),
                    h(
                        "button",
                        {"action": "submit", "class": "primary", "disabled": self.is_loading},
                        "Signing in…" if self.is_loading else "Sign in",
                    ),
                ),
            ),
            h("div", {"class": "footer"}, FOOTER),
        )
