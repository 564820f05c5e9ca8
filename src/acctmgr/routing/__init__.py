"""Navigation: Location environment and Router."""

from acctmgr.routing.location import Location
from acctmgr.routing.router import Router, fragment_for, resolve

__all__ = ["Location", "Router", "fragment_for", "resolve"]
