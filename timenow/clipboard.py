"""Clipboard sink backed by pyperclip."""

import logging

import pyperclip

_log = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """The system clipboard could not be written."""


def copy_to_clipboard(text: str) -> None:
    """Copy the given text to the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"could not copy to clipboard: {e}") from e
    _log.debug("copied %r to clipboard", text)
