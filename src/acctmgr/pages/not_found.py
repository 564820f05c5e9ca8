"""Fallback page for unknown fragments."""

from __future__ import annotations

from acctmgr.core.models import Element, Route
from acctmgr.pages.base import Action, BasePage
from acctmgr.ui.view import h


class NotFoundPage(BasePage):
    route = Route.NOT_FOUND

    def actions(self) -> dict[str, Action]:
        return {"go-home": self.navigate_to(Route.LOGIN)}

    def render(self) -> Element:
        return h(
            "div",
            {"class": "card"},
            self.header(),
            h("div", None, "Not found"),
            h("div", {"class": "actions"}, h("button", {"action": "go-home"}, "Go Home")),
        )
