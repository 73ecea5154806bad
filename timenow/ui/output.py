"""Diagnostic and listing output.

Diagnostics share one shape, a short tag followed by the message::

    warn | invalid timezone 'foo', using UTC
"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .theme import DEFAULT_PALETTE, console, err_console


def _render_tagged(tag: str, color: str, text: str, target: Optional[Console]) -> None:
    palette = DEFAULT_PALETTE
    line = Text()
    line.append(f"{tag} ", style=f"bold {color}")
    line.append("| ", style=f"dim {palette.text_muted}")
    line.append(text, style=color)
    (target or err_console).print(line)


def render_warning(text: str, target: Optional[Console] = None) -> None:
    """Render a non-fatal warning to stderr."""
    _render_tagged("warn", DEFAULT_PALETTE.warning, text, target)


def render_note(text: str, target: Optional[Console] = None) -> None:
    """Render an advisory note to stderr."""
    _render_tagged("note", DEFAULT_PALETTE.note, text, target)


def render_formats(rows: list[tuple[str, str]], target: Optional[Console] = None) -> None:
    """Render the format listing as a two-column table."""
    palette = DEFAULT_PALETTE
    table = Table(show_header=True, header_style=f"bold {palette.accent}", box=None)
    table.add_column("format")
    table.add_column("example", style=palette.text)
    for name, example in rows:
        table.add_row(name, example)
    (target or console).print(table)
