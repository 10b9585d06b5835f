"""
Calendar arithmetic on millisecond instants.

This module provides the pure conversions between epoch-millisecond instants
and timezone-aware datetimes, and the immutable calendar step function used
to generate candidate ticks. Nothing here keeps state between calls, so the
same functions are safe to use for any number of axes at once.
"""

import calendar
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import UnknownTimezoneError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)

MILLIS_PER_SECOND = 1_000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR


class TimeUnit(Enum):
    """Calendar units used for tick spacing, coarsest first."""
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    @property
    def marker(self) -> int:
        """Tick identity marker, distinct per unit."""
        return _UNIT_MARKERS[self]

    @property
    def is_calendar_based(self) -> bool:
        """True if steps of this unit follow the wall clock."""
        return self not in _FIXED_UNIT_MILLIS


_UNIT_MARKERS = {
    TimeUnit.YEAR: 6,
    TimeUnit.MONTH: 5,
    TimeUnit.WEEK: 4,
    TimeUnit.DAY: 3,
    TimeUnit.HOUR: 2,
    TimeUnit.MINUTE: 1,
    TimeUnit.SECOND: 0,
    TimeUnit.MILLISECOND: -1,
}

# Units whose steps have a fixed length regardless of calendar and DST
_FIXED_UNIT_MILLIS = {
    TimeUnit.HOUR: MILLIS_PER_HOUR,
    TimeUnit.MINUTE: MILLIS_PER_MINUTE,
    TimeUnit.SECOND: MILLIS_PER_SECOND,
    TimeUnit.MILLISECOND: 1,
}


def resolve_timezone(name: Optional[str]) -> tzinfo:
    """
    Resolve a timezone name to a tzinfo instance.

    Args:
        name: IANA timezone name, "UTC" or None (UTC)

    Returns:
        tzinfo for the name

    Raises:
        UnknownTimezoneError: If the name cannot be resolved
    """
    if name is None or name.upper() == "UTC":
        return timezone.utc

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownTimezoneError(f"Unknown timezone: {name}", timezone_name=name) from e


def from_instant(instant: int, tz: tzinfo = timezone.utc) -> datetime:
    """
    Convert an epoch-millisecond instant to an aware datetime.

    Args:
        instant: Milliseconds since the Unix epoch
        tz: Timezone the calendar fields should be expressed in

    Returns:
        Timezone-aware datetime in tz
    """
    return (EPOCH + timedelta(milliseconds=instant)).astimezone(tz)


def to_instant(value: datetime) -> int:
    """
    Convert a datetime to an epoch-millisecond instant.

    Naive datetimes are interpreted as UTC. Sub-millisecond digits are
    dropped.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    return (value - EPOCH) // ONE_MILLISECOND


def now_instant() -> int:
    """Get the current wall-clock time as an instant."""
    return to_instant(datetime.now(timezone.utc))


def add_months(value: datetime, months: int) -> datetime:
    """
    Move a datetime by whole months on the wall clock.

    The day of month is clamped to the length of the target month, so
    Jan 31 + 1 month is Feb 28 (or 29) and Feb 29 + 12 months is Feb 28.
    """
    total = value.month - 1 + months
    year = value.year + total // 12
    month = total % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])

    return value.replace(year=year, month=month, day=day)


def advance(instant: int, unit: TimeUnit, amount: int, tz: tzinfo = timezone.utc) -> int:
    """
    Step an instant forward by amount units.

    Year, month, week and day steps keep the wall-clock time of day in tz;
    hour and finer steps add a fixed number of milliseconds.

    Args:
        instant: Starting instant
        unit: Calendar unit to step by
        amount: Number of units (may be negative)
        tz: Timezone used for wall-clock steps

    Returns:
        The resulting instant
    """
    if not unit.is_calendar_based:
        return instant + amount * _FIXED_UNIT_MILLIS[unit]

    local = from_instant(instant, tz)

    if unit is TimeUnit.YEAR:
        shifted = add_months(local, 12 * amount)
    elif unit is TimeUnit.MONTH:
        shifted = add_months(local, amount)
    elif unit is TimeUnit.WEEK:
        shifted = local + timedelta(weeks=amount)
    else:
        shifted = local + timedelta(days=amount)

    return to_instant(shifted)


def format_instant(instant: int, tz: tzinfo = timezone.utc) -> str:
    """
    Format an instant for logging.

    Args:
        instant: Instant to format
        tz: Timezone to express it in

    Returns:
        ISO8601 formatted string with millisecond precision
    """
    return from_instant(instant, tz).isoformat(timespec="milliseconds")
