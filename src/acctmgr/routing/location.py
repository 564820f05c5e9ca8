"""Location — the navigation-state environment.

Holds one fragment string (e.g. "#/login") and notifies listeners when it
changes. Like the browser's hashchange event, notification is deferred to the
next loop iteration when an asyncio loop is running, and assigning the
current value again is a no-op.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

Listener = Callable[[str], None]


class Location:
    """Mutable fragment with change notification."""

    def __init__(self, fragment: str = "") -> None:
        self._fragment = fragment
        self._listeners: list[Listener] = []

    @property
    def fragment(self) -> str:
        return self._fragment

    def assign(self, fragment: str) -> None:
        """Set the fragment and schedule a change notification."""
        if fragment == self._fragment:
            return
        self._fragment = fragment
        logger.debug("Location changed to %s", fragment or "<empty>")

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._notify()
            return
        loop.call_soon(self._notify)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        # Listeners see the value current at delivery time, not assignment time.
        fragment = self._fragment
        for listener in list(self._listeners):
            listener(fragment)
