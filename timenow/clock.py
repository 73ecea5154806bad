"""System clock access for timenow.

Every read of the wall clock goes through :func:`now_utc`, so formatting
code can take a clock callable and tests can pass a :class:`FixedClock`.
"""

from datetime import datetime, timedelta, timezone


def now_utc() -> datetime:
    """Get the current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def shifted(instant: datetime, minutes: int) -> datetime:
    """Move an instant by a number of minutes east of UTC.

    The tzinfo is left untouched, so a UTC instant shifted by +330 reads
    as the wall clock in UTC+05:30 but is still labelled UTC.

    Args:
        instant: Datetime to shift.
        minutes: Offset in minutes, may be negative.

    Returns:
        The shifted datetime.
    """
    return instant + timedelta(minutes=minutes)


class FixedClock:
    """Clock callable that always returns the same instant."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def __call__(self) -> datetime:
        return self.instant
