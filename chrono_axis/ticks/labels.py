"""Tick label formatting based on the selected interval"""

from collections.abc import Callable
from datetime import datetime, timezone, tzinfo
from typing import Optional

from ..config.defaults import LabelParams
from ..utils.time import TimeUnit, from_instant
from .intervals import Interval

TickLabelFormatter = Callable[[datetime], str]

MILLIS_PLACEHOLDER = "{millis}"


def is_year_start(value: datetime) -> bool:
    """True at midnight on January 1st"""
    return (value.month == 1 and value.day == 1 and value.hour == 0
            and value.minute == 0 and value.second == 0 and value.microsecond == 0)


def pattern_for_unit(unit: TimeUnit, params: LabelParams) -> str:
    """
    Pick the general-purpose pattern for a unit

    Day and week show a medium date, hour and minute a short time, second a
    medium time and millisecond the full time with millisecond digits.
    """
    if unit in (TimeUnit.HOUR, TimeUnit.MINUTE):
        return params.short_time_format
    if unit is TimeUnit.SECOND:
        return params.medium_time_format
    if unit is TimeUnit.MILLISECOND:
        return params.full_time_format
    return params.medium_date_format


def render(value: datetime, pattern: str) -> str:
    """strftime with support for the {millis} placeholder"""
    if MILLIS_PLACEHOLDER in pattern:
        pattern = pattern.replace(MILLIS_PLACEHOLDER, f"{value.microsecond // 1000:03d}")
    return value.strftime(pattern)


def format_tick(
    instant: int,
    selected_interval: Interval,
    custom_formatter: Optional[TickLabelFormatter] = None,
    tz: tzinfo = timezone.utc,
    params: Optional[LabelParams] = None,
) -> str:
    """
    Format a tick label

    Args:
        instant: Tick instant
        selected_interval: Interval the tick plan was built with
        custom_formatter: Overrides all built-in formatting when given
        tz: Timezone the label is shown in
        params: Label patterns, defaults to LabelParams()

    Returns:
        Label text
    """
    value = from_instant(instant, tz)

    if custom_formatter is not None:
        return custom_formatter(value)

    params = params or LabelParams()
    unit = selected_interval.unit

    if unit is TimeUnit.YEAR and is_year_start(value):
        return render(value, params.year_format)
    if unit is TimeUnit.MONTH and value.day == 1:
        return render(value, params.month_format)

    return render(value, pattern_for_unit(unit, params))
