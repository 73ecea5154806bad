"""Timezone offset parsing.

Offsets are typed by hand, so several compact notations are accepted::

    5       -> +05:00
    -8:30   -> -08:30
    5.5     -> +05:30   (one digit after the dot is a fraction of an hour)
    8.40    -> +08:40   (two digits after the dot are literal minutes)

Note the dot notation is deliberately not uniform: ``8.4`` is 8h24m while
``8.40`` is 8h40m.
"""

import logging
import re
from decimal import Decimal, ROUND_HALF_UP

_log = logging.getLogger(__name__)

MIN_OFFSET = -12 * 60
MAX_OFFSET = 14 * 60

# ASCII digits with an optional sign; int() alone would also take
# underscores, padding and non-ASCII digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")


class OffsetError(ValueError):
    """A timezone offset string could not be parsed."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class OffsetRangeError(OffsetError):
    """A parsed offset fell outside -12h..+14h."""

    def __init__(self, text: str, minutes: int):
        super().__init__(
            f"timezone offset must be between -12h and +14h, got {text!r}",
            text,
        )
        self.minutes = minutes


def _to_int(part: str, what: str, text: str) -> int:
    if not _INT_RE.fullmatch(part):
        raise OffsetError(f"invalid {what} in {text!r}", text)
    return int(part)


def _check_minute(minutes: int, text: str) -> int:
    if minutes < 0 or minutes >= 60:
        raise OffsetError(f"minute must be 0-59 in {text!r}", text)
    return minutes


def _split(body: str, marker: str, text: str) -> tuple[str, str]:
    head, _, tail = body.partition(marker)
    if not head or not tail:
        raise OffsetError(f"invalid tz format: {text!r}", text)
    return head, tail


def _dot_minutes(frac: str, text: str) -> int:
    if not frac.isascii() or not frac.isdigit():
        raise OffsetError(f"invalid fraction in {text!r}", text)
    if len(frac) == 1:
        # fraction of an hour, rounded half up
        value = Decimal("0." + frac) * 60
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    if len(frac) == 2:
        return _check_minute(int(frac), text)
    raise OffsetError(f"invalid tz format: {text!r}", text)


def parse_offset(text: str) -> int:
    """Parse a timezone offset into minutes east of UTC.

    Args:
        text: Offset as typed by the user, e.g. ``"-8:30"``, ``"5.5"``,
            ``"+14"``. Surrounding whitespace is ignored and an empty
            string means UTC.

    Returns:
        Signed offset in minutes, within ``[-720, 840]``.

    Raises:
        OffsetRangeError: If the offset is outside -12h..+14h.
        OffsetError: If the string is malformed.
    """
    s = text.strip()
    if not s:
        return 0

    sign = 1
    if s[0] == "+":
        s = s[1:]
    elif s[0] == "-":
        sign = -1
        s = s[1:]

    if "." in s:
        hour_part, frac = _split(s, ".", text)
        hours = _to_int(hour_part, "hour", text)
        minutes = _dot_minutes(frac, text)
    elif ":" in s:
        hour_part, minute_part = _split(s, ":", text)
        hours = _to_int(hour_part, "hour", text)
        minutes = _check_minute(_to_int(minute_part, "minute", text), text)
    else:
        hours = _to_int(s, "hour", text)
        minutes = 0

    total = sign * (hours * 60 + minutes)
    if total < MIN_OFFSET or total > MAX_OFFSET:
        raise OffsetRangeError(text, total)

    _log.debug("parsed offset %r as %d minutes", text, total)
    return total


def format_offset(minutes: int) -> str:
    """Render an offset in minutes as ``+HH:MM``."""
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"
