"""View tree helpers: build Element trees and query them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from acctmgr.core.models import Element


def h(tag: str, props: dict[str, Any] | None = None, *children: Element | str | None) -> Element:
    """Build an Element. None / empty-string children are dropped."""
    kept = [c for c in children if c is not None and c != ""]
    return Element(tag=tag, props=props or {}, children=kept)


def walk(node: Element) -> Iterator[Element]:
    """Depth-first, pre-order iteration over elements."""
    yield node
    for child in node.children:
        if isinstance(child, Element):
            yield from walk(child)


def text_content(node: Element | str) -> str:
    """Concatenated text of a node and its descendants."""
    if isinstance(node, str):
        return node
    return "".join(text_content(c) for c in node.children)


def find_all(node: Element, *, tag: str | None = None, cls: str | None = None) -> list[Element]:
    """Elements matching tag and/or a class name in props["class"]."""
    matches: list[Element] = []
    for el in walk(node):
        if tag is not None and el.tag != tag:
            continue
        if cls is not None and cls not in str(el.props.get("class", "")).split():
            continue
        matches.append(el)
    return matches


def find_first(node: Element, *, tag: str | None = None, cls: str | None = None) -> Element | None:
    found = find_all(node, tag=tag, cls=cls)
    return found[0] if found else None
