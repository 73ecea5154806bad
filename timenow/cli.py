"""timenow CLI - print the current time and copy it to the clipboard."""

import logging
from typing import Optional

import click
from rich.text import Text

from .clipboard import ClipboardError, copy_to_clipboard
from .config import ConfigManager
from .formats import LAYOUTS, UNIX, available_formats, format_now
from .offset import OffsetError, format_offset, parse_offset
from .ui.output import render_formats, render_note, render_warning
from .ui.theme import console

_log = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_offset(tz_input: str) -> int:
    """Parse a timezone flag, warning and falling back to UTC on failure."""
    if not tz_input:
        return 0
    try:
        return parse_offset(tz_input)
    except OffsetError as e:
        render_warning(f"invalid timezone {tz_input!r}, using UTC: {e}")
        return 0


def run(tz_input: str, fmt: str, copy: bool = True, warn_ignored_tz: bool = True) -> str:
    """Produce, print and copy one timestamp. Never fails on bad input."""
    if warn_ignored_tz and fmt.lower() == UNIX and tz_input:
        render_warning(f"timezone flag {tz_input!r} ignored when format=unix")

    offset = resolve_offset(tz_input)
    _log.debug("format=%s offset=%s", fmt, format_offset(offset))

    result = format_now(fmt, offset)
    if result.error is not None:
        render_note(str(result.error))
    click.echo(result.text)

    if copy:
        try:
            copy_to_clipboard(result.text)
        except ClipboardError as e:
            render_warning(str(e))
    return result.text


@click.group(invoke_without_command=True)
@click.option("--timezone", "timezone_", default=None,
              help="Timezone offset, e.g. -8:30, 8.45, +5:30 (range -12..+14)")
@click.option("--tz", "tz_short", default=None, help="Shorthand for --timezone")
@click.option("--format", "format_", default=None,
              help="Output format: unix, rfc3339, ansic, stamp, stampmilli")
@click.option("-f", "format_short", default=None, help="Shorthand for --format")
@click.option("--no-copy", is_flag=True, help="Do not copy the result to the clipboard")
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False),
              help="Config file (default ~/.config/timenow/config.yaml)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="timenow")
@click.pass_context
def cli(
    ctx: click.Context,
    timezone_: Optional[str],
    tz_short: Optional[str],
    format_: Optional[str],
    format_short: Optional[str],
    no_copy: bool,
    config_path: Optional[str],
    verbose: bool,
):
    """TIMENOW - print the current time in a chosen format.

    The result is also copied to the clipboard. Timezone offsets apply to
    every format except unix.
    """
    _setup_logging(verbose)
    config = ConfigManager(config_path)
    ctx.obj = config

    if ctx.invoked_subcommand is not None:
        return

    # Long form wins over the shorthand, both win over config.
    tz_flag = timezone_ or tz_short
    tz_input = tz_flag or config.get_default_timezone()
    # Any explicit --format wins, even "unix"; the shorthand is only a fallback.
    fmt = format_ or format_short or config.get_default_format()

    run(
        tz_input,
        fmt,
        copy=config.clipboard_enabled() and not no_copy,
        warn_ignored_tz=bool(tz_flag),
    )


@cli.command()
def formats():
    """List output formats with an example of each."""
    rows = [(UNIX, "1136214245")]
    rows += [(name, layout.example) for name, layout in LAYOUTS.items()]
    render_formats(rows)


@cli.command(name="config")
@click.pass_obj
def show_config(config: ConfigManager):
    """Show configuration."""
    tz_input = config.get_default_timezone()
    try:
        offset = format_offset(parse_offset(tz_input))
    except OffsetError as e:
        offset = f"invalid ({e})"

    # Plain Text: config values are user input, not rich markup.
    lines = [
        f"Config file: {config.config_path}",
        f"Default format: {config.get_default_format()}",
        f"Default timezone: {tz_input or 'UTC'} ({offset})",
        f"Clipboard: {'enabled' if config.clipboard_enabled() else 'disabled'}",
        f"Formats: {', '.join(available_formats())}",
    ]
    for line in lines:
        console.print(Text(line), soft_wrap=True)


if __name__ == "__main__":
    cli()
