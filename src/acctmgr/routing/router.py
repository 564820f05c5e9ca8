"""Hash-style router: fragment string -> Route."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from acctmgr.core.models import DEFAULT_FRAGMENT, ROUTE_FRAGMENTS, Route

if TYPE_CHECKING:
    from acctmgr.routing.location import Location

logger = logging.getLogger(__name__)

_FRAGMENT_ROUTES: dict[str, Route] = {frag: route for route, frag in ROUTE_FRAGMENTS.items()}


def resolve(fragment: str) -> Route:
    """Map a fragment to its Route. Empty means login; unknown means not-found."""
    if not fragment:
        return Route.LOGIN
    return _FRAGMENT_ROUTES.get(fragment, Route.NOT_FOUND)


def fragment_for(target: Route | str) -> str:
    """Accept a Route, a route name ("account") or a raw fragment ("#/account")."""
    if isinstance(target, Route):
        return ROUTE_FRAGMENTS.get(target, f"#/{target.value}")
    if target.startswith("#"):
        return target
    try:
        route = Route(target)
    except ValueError:
        return f"#/{target}"
    return ROUTE_FRAGMENTS.get(route, f"#/{route.value}")


class Router:
    """Tracks the current fragment of a Location and fans out changes.

    On construction an empty location is rewritten to the login fragment.
    """

    def __init__(self, location: Location) -> None:
        self._location = location
        self._subscribers: list[Callable[[str], None]] = []
        self._current = location.fragment or DEFAULT_FRAGMENT
        location.add_listener(self._on_change)
        if not location.fragment:
            location.assign(DEFAULT_FRAGMENT)

    @property
    def current(self) -> str:
        """Current fragment (login default when empty)."""
        return self._current

    @property
    def route(self) -> Route:
        return resolve(self._current)

    @property
    def settled(self) -> bool:
        """True once subscribers have heard about the latest location change."""
        return (self._location.fragment or DEFAULT_FRAGMENT) == self._current

    def navigate(self, target: Route | str) -> None:
        """Set the location fragment. Subscribers hear about it asynchronously."""
        self._location.assign(fragment_for(target))

    def subscribe(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """Register callback(fragment); returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def close(self) -> None:
        self._location.remove_listener(self._on_change)
        self._subscribers.clear()

    def _on_change(self, fragment: str) -> None:
        self._current = fragment or DEFAULT_FRAGMENT
        logger.debug("Route -> %s (%s)", resolve(self._current), self._current)
        for callback in list(self._subscribers):
            callback(self._current)
