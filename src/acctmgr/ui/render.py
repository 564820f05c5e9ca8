"""Plain-text rendering of view trees for the terminal host.

Each element kind maps to one line shape:

    h1       == Account Manager ==
    nav      [Login]  *Register*
    h2       ## Register
    error    ! Passwords do not match.
    success  + Registration successful. You can now log in.
    input      Full name [name]: Jane Doe
    actions  (back) Back to login   (submit) Create account

Password values are masked.
"""

from __future__ import annotations

from acctmgr.core.models import Element
from acctmgr.ui.view import text_content

_MASK = "*"


def render_text(root: Element) -> str:
    """Render a tree to lines of text."""
    lines: list[str] = []
    _render(root, lines)
    return "\n".join(lines)


def _render(node: Element, lines: list[str]) -> None:
    classes = str(node.props.get("class", "")).split()

    if node.tag == "nav":
        links = [_link(link) for link in node.children if isinstance(link, Element)]
        lines.append("  ".join(links))
        return
    if node.tag == "h1":
        lines.append(f"== {text_content(node)} ==")
        return
    if node.tag == "h2":
        lines.append(f"## {text_content(node)}")
        return
    if node.tag == "input":
        lines.append(_input(node))
        return
    if "actions" in classes:
        buttons = [_button(b) for b in node.children if isinstance(b, Element)]
        lines.append("   ".join(buttons))
        return
    if "error" in classes:
        lines.append(f"! {text_content(node)}")
        return
    if "success-text" in classes:
        lines.append(f"+ {text_content(node)}")
        return

    text_children = [c for c in node.children if isinstance(c, str)]
    if text_children:
        lines.append(text_content(node))
        return
    for child in node.children:
        if isinstance(child, Element):
            _render(child, lines)


def _link(node: Element) -> str:
    label = text_content(node)
    return f"*{label}*" if node.props.get("active") else f"[{label}]"


def _input(node: Element) -> str:
    value = str(node.props.get("value", ""))
    if node.props.get("type") == "password":
        value = _MASK * len(value)
    name = node.props.get("name", "?")
    label = node.props.get("label", name)
    if node.props.get("disabled"):
        return f"  {label}: {value} (read only)"
    return f"  {label} [{name}]: {value}"


def _button(node: Element) -> str:
    disabled = " [disabled]" if node.props.get("disabled") else ""
    return f"({node.props.get('action', '?')}) {text_content(node)}{disabled}"
