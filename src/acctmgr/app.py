"""Top-level controller: route -> page, session redirect policy, mounting."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from acctmgr.auth.session import SessionMachine
from acctmgr.core.models import Route
from acctmgr.pages import PAGE_REGISTRY, PageContext
from acctmgr.routing.location import Location
from acctmgr.routing.router import Router, resolve
from acctmgr.storage import build_store

if TYPE_CHECKING:
    from collections.abc import Callable

    from acctmgr.core.models import Config
    from acctmgr.pages.base import BasePage
    from acctmgr.storage.adapter import StoreAdapter
    from acctmgr.ui.host import RenderHost

logger = logging.getLogger(__name__)

# An authenticated user is bounced from these routes to the account page.
_AUTH_FORMS = frozenset({Route.LOGIN, Route.REGISTER})


class AppController:
    """Observes the router and keeps exactly one page mounted on the host.

    Args:
        machine: Session state machine (the in-memory session mirror).
        router: Router over the navigation Location.
        host: Where rendered trees are mounted.
    """

    def __init__(self, machine: SessionMachine, router: Router, host: RenderHost) -> None:
        self._machine = machine
        self._router = router
        self._host = host
        self._page: BasePage | None = None
        self._shown: str | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._ctx = PageContext(
            machine=machine,
            router=router,
            on_login=self._handle_login,
            on_logout=self._handle_logout,
            refresh=self.refresh,
        )

    @property
    def machine(self) -> SessionMachine:
        return self._machine

    @property
    def router(self) -> Router:
        return self._router

    @property
    def host(self) -> RenderHost:
        return self._host

    @property
    def page(self) -> BasePage | None:
        return self._page

    def start(self) -> None:
        """Subscribe to route changes and mount the current route's page."""
        if self._unsubscribe is None:
            self._unsubscribe = self._router.subscribe(self._on_route)
        self._show(self._router.current)

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def refresh(self) -> None:
        """Re-mount the current page with its latest state."""
        if self._page is not None:
            self._host.mount(self._page.render())

    def navigate(self, target: Route | str) -> None:
        self._router.navigate(target)

    def set_field(self, name: str, value: str) -> None:
        if self._page is None:
            return
        self._page.set_field(name, value)

    async def dispatch(self, action: str) -> None:
        """Run a page action, let resulting navigation settle, re-mount."""
        if self._page is None:
            return
        page = self._page
        await page.handle_action(action)
        await self.settle()
        if self._page is page:
            self.refresh()

    async def settle(self) -> None:
        """Yield to the loop until pending route notifications are delivered."""
        while not self._router.settled:
            await asyncio.sleep(0)

    # -- Internals ------------------------------------------------------------

    def _on_route(self, fragment: str) -> None:
        # The first-run default fragment is announced after start() already
        # mounted it.
        if self._page is not None and fragment == self._shown:
            return
        self._show(fragment)

    def _show(self, fragment: str) -> None:
        route = resolve(fragment)
        if self._machine.session is not None and route in _AUTH_FORMS:
            logger.debug("Authenticated; redirecting %s to account", route)
            self._router.navigate(Route.ACCOUNT)
            return

        self._page = PAGE_REGISTRY[route](self._ctx)
        self._shown = fragment
        self.refresh()

    def _handle_login(self) -> None:
        self._router.navigate(Route.ACCOUNT)

    def _handle_logout(self) -> None:
        self._machine.logout()
        self._router.navigate(Route.LOGIN)


def build_app(
    config: Config,
    host: RenderHost,
    store: StoreAdapter | None = None,
    fragment: str = "",
) -> AppController:
    """Wire store, session machine, router and controller from config."""
    if store is None:
        store = build_store(config)
    machine = SessionMachine(store, login_delay_ms=config.ui.login_delay_ms)
    router = Router(Location(fragment))
    return AppController(machine, router, host)
