"""Rendering hosts.

A host mounts exactly one root view tree at a time; each mount replaces the
previous one. TerminalHost prints through typer, BufferHost keeps the trees
for inspection (tests, scripted sessions).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from acctmgr.core.models import Element
from acctmgr.ui.render import render_text


class RenderHost(ABC):
    """Container the application mounts its root tree into."""

    @abstractmethod
    def mount(self, tree: Element) -> None:
        """Replace the displayed tree."""
        ...

    @abstractmethod
    def notice(self, message: str) -> None:
        """Out-of-tree message (help text, command errors)."""
        ...


class TerminalHost(RenderHost):
    """Terminal output using typer."""

    def __init__(self, color: bool = True) -> None:
        self._color = color

    def mount(self, tree: Element) -> None:
        import typer

        typer.echo("")
        for line in render_text(tree).splitlines():
            typer.echo(self._style(line))

    def notice(self, message: str) -> None:
        import typer

        typer.echo(message)

    def _style(self, line: str) -> str:
        import typer

        if not self._color:
            return line
        if line.startswith("! "):
            return typer.style(line, fg=typer.colors.RED)
        if line.startswith("+ "):
            return typer.style(line, fg=typer.colors.GREEN)
        if line.startswith(("== ", "## ")):
            return typer.style(line, bold=True)
        return line


class BufferHost(RenderHost):
    """Collects mounted trees and notices."""

    def __init__(self) -> None:
        self.trees: list[Element] = []
        self.notices: list[str] = []

    @property
    def current(self) -> Element | None:
        return self.trees[-1] if self.trees else None

    def mount(self, tree: Element) -> None:
        self.trees.append(tree)

    def notice(self, message: str) -> None:
        self.notices.append(message)

    def to_text(self) -> str:
        """Text of the currently mounted tree."""
        return render_text(self.current) if self.current is not None else ""
