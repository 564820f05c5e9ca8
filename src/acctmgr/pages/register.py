"""Registration page."""

from __future__ import annotations

from acctmgr.core.models import Element, Route
from acctmgr.pages.base import Action, BasePage
from acctmgr.ui.view import h

PLAINTEXT_NOTE = (
    "Passwords are stored in plain text for demo simplicity. Do not use real credentials."
)


class RegisterPage(BasePage):
    route = Route.REGISTER
    field_names = ("name", "email", "password", "confirm")

    def actions(self) -> dict[str, Action]:
        return {
            "submit": self.submit,
            "back": self.navigate_to(Route.LOGIN),
        }

    async def submit(self) -> None:
        self.error = ""
        self.success = ""
        result = self.ctx.machine.register(
            self.fields["name"],
            self.fields["email"],
            self.fields["password"],
            self.fields["confirm"],
        )
        if not result.ok:
            self.error = result.message
            return
        self.success = result.message
        self.fields = dict.fromkeys(self.field_names, "")

    def render(self) -> Element:
        return h(
            "div",
            {"class": "card"},
            self.header(),
            h("h2", None, "Register"),
            h("div", {"class": "note"}, PLAINTEXT_NOTE),
            h(
                "form",
                {"action": "submit"},
                self.field_input("name", "Full name", placeholder="Jane Doe"),
                self.field_input("email", "Email", "email", placeholder="you@example.com"),
                self.field_input("password", "Password", "password", placeholder="••••"),
                self.field_input("confirm", "Confirm password", "password", placeholder="••••"),
                h(
                    "div",
                    {"class": "actions"},
                    h("button", {"action": "back"}, "Back to login"),
                    h("button", {"action": "submit", "class": "success"}, "Create account"),
                ),
                self.messages(),
            ),
        )
