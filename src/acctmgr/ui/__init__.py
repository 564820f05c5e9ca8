"""View tree, text renderer and rendering hosts."""

from acctmgr.ui.host import BufferHost, RenderHost, TerminalHost
from acctmgr.ui.render import render_text
from acctmgr.ui.view import find_all, find_first, h, text_content, walk

__all__ = [
    "BufferHost",
    "RenderHost",
    "TerminalHost",
    "find_all",
    "find_first",
    "h",
    "render_text",
    "text_content",
    "walk",
]
