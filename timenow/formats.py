"""Output formats for the current time."""

import logging
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Optional

from .clock import now_utc, shifted

_log = logging.getLogger(__name__)

UNIX = "unix"
_PLACEHOLDER_YEAR = 2000

# Fixed English names; strftime's %a/%b would follow the process locale.
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class UnknownFormatError(ValueError):
    """The requested format token is not one of the known formats."""

    def __init__(self, token: str):
        super().__init__(f"unknown format {token!r}, defaulting to unix")
        self.token = token


@dataclass(frozen=True)
class Layout:
    """A fixed textual layout for a shifted instant."""

    name: str
    render: Callable[[datetime], str]
    pattern: str
    example: str


@dataclass(frozen=True)
class FormatResult:
    """Formatted time plus an advisory error.

    ``text`` is always usable; ``error`` is set when the requested format
    was unknown and ``text`` holds the Unix-seconds fallback instead.
    """

    text: str
    error: Optional[UnknownFormatError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _stamp(t: datetime) -> str:
    return f"{_MONTHS[t.month - 1]} {t.day:>2} {t:%H:%M:%S}"


def _rfc3339(t: datetime) -> str:
    # The shifted wall clock keeps the Z designator.
    return t.strftime("%Y-%m-%dT%H:%M:%SZ")


def _ansic(t: datetime) -> str:
    return f"{_DAYS[t.weekday()]} {_stamp(t)} {t.year}"


def _stampmilli(t: datetime) -> str:
    return f"{_stamp(t)}.{t.microsecond // 1000:03d}"


LAYOUTS = MappingProxyType({
    "rfc3339": Layout(
        name="rfc3339",
        render=_rfc3339,
        pattern="%Y-%m-%dT%H:%M:%SZ",
        example="2006-01-02T15:04:05Z",
    ),
    "ansic": Layout(
        name="ansic",
        render=_ansic,
        pattern="%a %b %d %H:%M:%S %Y",
        example="Mon Jan  2 15:04:05 2006",
    ),
    "stamp": Layout(
        name="stamp",
        render=_stamp,
        pattern="%b %d %H:%M:%S",
        example="Jan  2 15:04:05",
    ),
    "stampmilli": Layout(
        name="stampmilli",
        render=_stampmilli,
        pattern="%b %d %H:%M:%S.%f",
        example="Jan  2 15:04:05.000",
    ),
})


def available_formats() -> list[str]:
    """Format tokens in display order, ``unix`` first."""
    return [UNIX, *LAYOUTS]


def _unix(instant: datetime) -> str:
    return str(int(instant.timestamp()))


def format_now(
    fmt: str,
    offset_minutes: int = 0,
    clock: Optional[Callable[[], datetime]] = None,
) -> FormatResult:
    """Render the current time.

    Args:
        fmt: Format token, matched case-insensitively.
        offset_minutes: Minutes east of UTC applied to every format except
            ``unix``, where it is ignored.
        clock: Callable returning the current UTC instant. Read once.

    Returns:
        A :class:`FormatResult`. For an unknown token the text is the
        Unix-seconds rendering and ``error`` is an
        :class:`UnknownFormatError`; nothing is raised.
    """
    instant = (clock or now_utc)()
    token = (fmt or "").lower()

    if token == UNIX:
        return FormatResult(_unix(instant))

    layout = LAYOUTS.get(token)
    if layout is None:
        _log.debug("unknown format %r, falling back to unix", fmt)
        return FormatResult(_unix(instant), UnknownFormatError(fmt))

    return FormatResult(layout.render(shifted(instant, offset_minutes)))


def parse_formatted(fmt: str, text: str) -> datetime:
    """Parse text produced by :func:`format_now` back into a naive datetime.

    Layouts without a year parse into the leap year 2000 so that Feb 29
    stamps stay valid.

    Raises:
        UnknownFormatError: If ``fmt`` has no layout (``unix`` included).
        ValueError: If ``text`` does not match the layout.
    """
    layout = LAYOUTS.get(fmt.lower())
    if layout is None:
        raise UnknownFormatError(fmt)
    if "%Y" not in layout.pattern:
        return datetime.strptime(f"{_PLACEHOLDER_YEAR} {text}", "%Y " + layout.pattern)
    return datetime.strptime(text, layout.pattern)
