"""Evening: snap intermediate ticks to the start of their calendar unit"""

from datetime import datetime, timezone, tzinfo

from ..utils.time import TimeUnit, from_instant, to_instant


def even_datetime(value: datetime, unit: TimeUnit) -> datetime:
    """
    Truncate a datetime to the start of its unit

    Weeks are truncated to midnight only; the day of week is kept.
    """
    if unit is TimeUnit.MILLISECOND:
        return value
    if unit is TimeUnit.SECOND:
        return value.replace(microsecond=0)
    if unit is TimeUnit.MINUTE:
        return value.replace(second=0, microsecond=0)
    if unit is TimeUnit.HOUR:
        return value.replace(minute=0, second=0, microsecond=0)

    midnight = value.replace(hour=0, minute=0, second=0, microsecond=0)
    if unit is TimeUnit.MONTH:
        return midnight.replace(day=1)
    if unit is TimeUnit.YEAR:
        return midnight.replace(month=1, day=1)
    return midnight


def even_instant(instant: int, unit: TimeUnit, tz: tzinfo = timezone.utc) -> int:
    """
    Snap an instant to the start of its unit in tz

    Idempotent: evening an already even instant returns it unchanged.
    """
    if unit is TimeUnit.MILLISECOND:
        return instant

    return to_instant(even_datetime(from_instant(instant, tz), unit))


def make_dates_even(instants: list[int], unit: TimeUnit, tz: tzinfo = timezone.utc) -> list[int]:
    """
    Even every tick except the first and last

    The first and last ticks are the range bounds and stay exact. Lists of
    two or fewer entries contain only bounds and are returned as a copy.

    Args:
        instants: Ticks including both bounds
        unit: Unit of the selected interval
        tz: Timezone the calendar boundaries are taken in

    Returns:
        New list with the intermediate ticks evened
    """
    if len(instants) <= 2:
        return list(instants)

    last = len(instants) - 1
    return [
        instant if i in (0, last) else even_instant(instant, unit, tz)
        for i, instant in enumerate(instants)
    ]
