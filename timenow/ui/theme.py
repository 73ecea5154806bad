"""timenow theme: palette and shared consoles."""

from dataclasses import dataclass

from rich.console import Console


@dataclass(frozen=True)
class ColorPalette:
    """Colors for diagnostics and listings."""

    text: str = "#b8b8cc"
    text_dim: str = "#4a4a60"
    text_muted: str = "#363648"
    accent: str = "#00d4e5"
    warning: str = "#e5c747"
    note: str = "#5a9cf0"


DEFAULT_PALETTE = ColorPalette()

# The result itself goes to stdout through click.echo; rich only ever
# writes diagnostics and listings.
console = Console()
err_console = Console(stderr=True, soft_wrap=True)
