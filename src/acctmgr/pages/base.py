"""BasePage ABC — one routed screen with its own form state.

LoginPage, RegisterPage, AccountPage and NotFoundPage implement this.
Pages never touch module-level state: everything they need arrives through
the PageContext handed over by the controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, ClassVar

from acctmgr.core.exceptions import CommandError
from acctmgr.core.models import ROUTE_FRAGMENTS, Element, Route
from acctmgr.ui.view import h

if TYPE_CHECKING:
    from acctmgr.auth.session import SessionMachine
    from acctmgr.routing.router import Router

BRAND = "Account Manager"

Action = Callable[[], Awaitable[None]]


class PageContext:
    """Dependencies shared by every page.

    Args:
        machine: Session state machine (owns the store).
        router: Router used for navigation.
        on_login: Called after a successful login.
        on_logout: Called when the user asks to log out.
        refresh: Re-mount the current page (after async state changes).
    """

    def __init__(
        self,
        machine: SessionMachine,
        router: Router,
        on_login: Callable[[], None],
        on_logout: Callable[[], None],
        refresh: Callable[[], None],
    ) -> None:
        self.machine = machine
        self.router = router
        self.on_login = on_login
        self.on_logout = on_logout
        self.refresh = refresh


class BasePage(ABC):
    """Routed page abstract interface."""

    route: ClassVar[Route]
    field_names: ClassVar[tuple[str, ...]] = ()

    def __init__(self, ctx: PageContext) -> None:
        self.ctx = ctx
        self.fields: dict[str, str] = dict.fromkeys(self.field_names, "")
        self.error = ""
        self.success = ""

    @abstractmethod
    def render(self) -> Element:
        """Build the page's view tree from current state."""
        ...

    @abstractmethod
    def actions(self) -> dict[str, Action]:
        """Action name -> handler for every button currently on screen."""
        ...

    @property
    def editable_fields(self) -> tuple[str, ...]:
        return tuple(self.fields)

    def set_field(self, name: str, value: str) -> None:
        if name not in self.editable_fields:
            msg = f"Unknown field '{name}'. Fields: {', '.join(self.editable_fields) or 'none'}"
            raise CommandError(msg)
        self.fields[name] = value

    async def handle_action(self, name: str) -> None:
        handler = self.actions().get(name)
        if handler is None:
            available = ", ".join(self.actions()) or "none"
            msg = f"Unknown action '{name}'. Actions: {available}"
            raise CommandError(msg)
        await handler()

    # -- Shared building blocks ---------------------------------------------

    def header(self) -> Element:
        current = self.ctx.router.current
        links = [self._nav_link(Route.LOGIN, "Login", current)]
        links.append(self._nav_link(Route.REGISTER, "Register", current))
        if self.ctx.machine.session is not None:
            links.append(self._nav_link(Route.ACCOUNT, "My Account", current))
        return h(
            "div",
            {"class": "header"},
            h("h1", {"class": "brand-title"}, BRAND),
            h("nav", {"class": "nav"}, *links),
        )

    def messages(self) -> Element | None:
        """Error box, or the success text when there is no error."""
        if self.error:
            return h("div", {"class": "error"}, self.error)
        if self.success:
            return h("div", {"class": "success-text"}, self.success)
        return None

    def field_input(self, name: str, label: str, input_type: str = "text", **props: object) -> Element:
        return h(
            "input",
            {"name": name, "label": label, "type": input_type, "value": self.fields[name], **props},
        )

    def navigate_to(self, route: Route) -> Action:
        async def go() -> None:
            self.ctx.router.navigate(route)

        return go

    @staticmethod
    def _nav_link(route: Route, label: str, current: str) -> Element:
        fragment = ROUTE_FRAGMENTS[route]
        return h(
            "a",
            {"class": "link", "href": fragment, "active": current == fragment},
            label,
        )
