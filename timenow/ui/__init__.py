"""timenow UI: rich consoles and diagnostic rendering."""

from .theme import ColorPalette, DEFAULT_PALETTE, console, err_console
from .output import render_formats, render_note, render_warning

__all__ = [
    "ColorPalette",
    "DEFAULT_PALETTE",
    "console",
    "err_console",
    "render_formats",
    "render_note",
    "render_warning",
]
