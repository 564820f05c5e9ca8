"""Tests for view helpers, text rendering and hosts."""

from __future__ import annotations

import re

import pytest

from acctmgr.core.models import Element
from acctmgr.ui import BufferHost, TerminalHost, find_all, find_first, h, render_text, text_content


def _strip_ansi(text: str) -> str:
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


@pytest.fixture()
def tree() -> Element:
    return h(
        "div",
        {"class": "card"},
        h("div", {"class": "header"}, h("h1", None, "Account Manager"),
          h("nav", None,
            h("a", {"active": True}, "Login"),
            h("a", {"active": False}, "Register"))),
        h("h2", None, "Login"),
        h("div", {"class": "error"}, "Invalid email or password."),
        h("form", None,
          h("input", {"name": "email", "label": "Email", "value": "jane@x.com"}),
          h("input", {"name": "password", "label": "Password", "type": "password", "value": "abcd"}),
          h("div", {"class": "actions"},
            h("button", {"action": "submit", "disabled": True}, "Signing in…"))),
        None,
        "",
    )


class TestView:
    def test_h_drops_empty_children(self, tree: Element) -> None:
        assert len(tree.children) == 4

    def test_find(self, tree: Element) -> None:
        inputs = find_all(tree, tag="input")
        assert [i.props["name"] for i in inputs] == ["email", "password"]
        error = find_first(tree, cls="error")
        assert error is not None
        assert text_content(error) == "Invalid email or password."
        assert find_first(tree, cls="success-text") is None


class TestRenderText:
    def test_lines(self, tree: Element) -> None:
        assert render_text(tree).splitlines() == [
            "== Account Manager ==",
            "*Login*  [Register]",
            "## Login",
            "! Invalid email or password.",
            "  Email [email]: jane@x.com",
            "  Password [password]: ****",
            "(submit) Signing in… [disabled]",
        ]

    def test_read_only_input(self) -> None:
        node = h("input", {"name": "email", "label": "Email", "value": "a@b.c", "disabled": True})
        assert render_text(node) == "  Email: a@b.c (read only)"

    def test_success_and_text(self) -> None:
        node = h("div", None, h("div", {"class": "success-text"}, "Saved."), h("div", None, "Hi"))
        assert render_text(node).splitlines() == ["+ Saved.", "Hi"]


class TestHosts:
    def test_buffer_host(self, tree: Element) -> None:
        host = BufferHost()
        assert host.current is None
        assert host.to_text() == ""
        host.mount(tree)
        host.notice("hello")
        assert host.current is tree
        assert "## Login" in host.to_text()
        assert host.notices == ["hello"]

    def test_terminal_host(self, tree: Element, capsys: pytest.CaptureFixture[str]) -> None:
        TerminalHost(color=True).mount(tree)
        out = _strip_ansi(capsys.readouterr().out)
        assert "== Account Manager ==" in out
        assert "! Invalid email or password." in out

    def test_terminal_host_no_color(self, tree: Element, capsys: pytest.CaptureFixture[str]) -> None:
        TerminalHost(color=False).mount(tree)
        out = capsys.readouterr().out
        assert "\x1b[" not in out
