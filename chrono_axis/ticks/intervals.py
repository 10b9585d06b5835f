"""Interval catalog used for tick spacing"""

from dataclasses import dataclass

from ..utils.time import TimeUnit


@dataclass(frozen=True)
class Interval:
    """A catalog entry: tick every `amount` units"""
    name: str
    unit: TimeUnit
    amount: int

    def __str__(self) -> str:
        return self.name


DECADE = Interval("DECADE", TimeUnit.YEAR, 10)
YEAR = Interval("YEAR", TimeUnit.YEAR, 1)
MONTH_6 = Interval("MONTH_6", TimeUnit.MONTH, 6)
MONTH_3 = Interval("MONTH_3", TimeUnit.MONTH, 3)
MONTH_1 = Interval("MONTH_1", TimeUnit.MONTH, 1)
WEEK = Interval("WEEK", TimeUnit.WEEK, 1)
DAY = Interval("DAY", TimeUnit.DAY, 1)
HOUR_12 = Interval("HOUR_12", TimeUnit.HOUR, 12)
HOUR_6 = Interval("HOUR_6", TimeUnit.HOUR, 6)
HOUR_3 = Interval("HOUR_3", TimeUnit.HOUR, 3)
HOUR_1 = Interval("HOUR_1", TimeUnit.HOUR, 1)
MINUTE_15 = Interval("MINUTE_15", TimeUnit.MINUTE, 15)
MINUTE_5 = Interval("MINUTE_5", TimeUnit.MINUTE, 5)
MINUTE_1 = Interval("MINUTE_1", TimeUnit.MINUTE, 1)
SECOND_15 = Interval("SECOND_15", TimeUnit.SECOND, 15)
SECOND_5 = Interval("SECOND_5", TimeUnit.SECOND, 5)
SECOND_1 = Interval("SECOND_1", TimeUnit.SECOND, 1)
MILLISECOND = Interval("MILLISECOND", TimeUnit.MILLISECOND, 1)

# Coarsest first; selection walks this in order
INTERVAL_CATALOG: tuple[Interval, ...] = (
    DECADE,
    YEAR,
    MONTH_6,
    MONTH_3,
    MONTH_1,
    WEEK,
    DAY,
    HOUR_12,
    HOUR_6,
    HOUR_3,
    HOUR_1,
    MINUTE_15,
    MINUTE_5,
    MINUTE_1,
    SECOND_15,
    SECOND_5,
    SECOND_1,
    MILLISECOND,
)

FINEST_INTERVAL = INTERVAL_CATALOG[-1]
