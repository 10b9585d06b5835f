"""Tick planning: interval selection, evening, edge trimming and labels"""

from .evening import even_instant, make_dates_even
from .intervals import FINEST_INTERVAL, INTERVAL_CATALOG, Interval
from .labels import format_tick
from .selection import IntervalSelection, collect_candidates, select_interval
from .trimming import trim_edges

__all__ = [
    "INTERVAL_CATALOG",
    "FINEST_INTERVAL",
    "Interval",
    "IntervalSelection",
    "collect_candidates",
    "select_interval",
    "even_instant",
    "make_dates_even",
    "trim_edges",
    "format_tick",
]
