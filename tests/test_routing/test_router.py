"""Tests for Location and Router."""

from __future__ import annotations

import asyncio

import pytest

from acctmgr.core.models import Route
from acctmgr.routing import Location, Router, fragment_for, resolve


class TestResolve:
    @pytest.mark.parametrize(
        ("fragment", "route"),
        [
            ("#/login", Route.LOGIN),
            ("#/register", Route.REGISTER),
            ("#/account", Route.ACCOUNT),
            ("", Route.LOGIN),
            ("#/accounts", Route.NOT_FOUND),
            ("#/login/extra", Route.NOT_FOUND),
            ("#/LOGIN", Route.NOT_FOUND),
            ("#", Route.NOT_FOUND),
        ],
    )
    def test_exact_match(self, fragment: str, route: Route) -> None:
        assert resolve(fragment) == route


class TestFragmentFor:
    def test_route(self) -> None:
        assert fragment_for(Route.ACCOUNT) == "#/account"

    def test_name(self) -> None:
        assert fragment_for("register") == "#/register"

    def test_raw_fragment(self) -> None:
        assert fragment_for("#/whatever") == "#/whatever"

    def test_unknown_name(self) -> None:
        assert fragment_for("settings") == "#/settings"


class TestLocation:
    def test_sync_notification_without_loop(self) -> None:
        loc = Location("#/login")
        seen: list[str] = []
        loc.add_listener(seen.append)
        loc.assign("#/register")
        assert seen == ["#/register"]

    def test_same_value_does_not_notify(self) -> None:
        loc = Location("#/login")
        seen: list[str] = []
        loc.add_listener(seen.append)
        loc.assign("#/login")
        assert seen == []

    def test_removed_listener(self) -> None:
        loc = Location()
        seen: list[str] = []
        loc.add_listener(seen.append)
        loc.remove_listener(seen.append)
        loc.assign("#/x")
        assert seen == []

    @pytest.mark.asyncio
    async def test_deferred_inside_loop(self) -> None:
        loc = Location("#/login")
        seen: list[str] = []
        loc.add_listener(seen.append)
        loc.assign("#/account")
        assert seen == []
        await asyncio.sleep(0)
        assert seen == ["#/account"]


class TestRouter:
    def test_empty_location_defaults_to_login(self) -> None:
        loc = Location("")
        router = Router(loc)
        assert loc.fragment == "#/login"
        assert router.current == "#/login"
        assert router.route == Route.LOGIN

    def test_initial_fragment_kept(self) -> None:
        router = Router(Location("#/register"))
        assert router.route == Route.REGISTER

    def test_navigate_notifies_subscribers(self) -> None:
        router = Router(Location("#/login"))
        seen: list[str] = []
        router.subscribe(seen.append)
        router.navigate(Route.ACCOUNT)
        router.navigate("#/nowhere")
        assert seen == ["#/account", "#/nowhere"]
        assert router.route == Route.NOT_FOUND

    def test_cleared_fragment_reports_login(self) -> None:
        loc = Location("#/account")
        router = Router(loc)
        seen: list[str] = []
        router.subscribe(seen.append)
        loc.assign("")
        assert seen == ["#/login"]

    def test_unsubscribe(self) -> None:
        router = Router(Location("#/login"))
        seen: list[str] = []
        unsubscribe = router.subscribe(seen.append)
        unsubscribe()
        router.navigate("register")
        assert seen == []

    def test_close_detaches_from_location(self) -> None:
        loc = Location("#/login")
        router = Router(loc)
        router.close()
        loc.assign("#/register")
        assert router.current == "#/login"

    @pytest.mark.asyncio
    async def test_settled(self) -> None:
        router = Router(Location("#/login"))
        router.navigate("account")
        assert router.settled is False
        await asyncio.sleep(0)
        assert router.settled is True
        assert router.current == "#/account"
