"""Interval selection: pick the catalog entry that best fits the tick density"""

import math
from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import Optional

from ..utils.time import advance
from .intervals import INTERVAL_CATALOG, Interval


@dataclass(frozen=True)
class IntervalSelection:
    """Outcome of walking the interval catalog"""
    interval: Interval
    candidates: tuple[int, ...]     # Calendar steps from lower, upper not yet appended
    average_ticks: float
    fallback: bool = False          # True if no interval exceeded the target


def collect_candidates(
    lower: int,
    upper: int,
    interval: Interval,
    tz: tzinfo = timezone.utc,
    limit: Optional[int] = None,
) -> list[int]:
    """
    Step from lower by the interval until the cursor passes upper

    Args:
        lower: First candidate
        upper: Inclusive end of the range
        interval: Catalog interval to step by
        tz: Timezone for wall-clock steps
        limit: Stop after this many candidates

    Returns:
        Candidate instants, lower first
    """
    candidates = []
    cursor = lower

    while cursor <= upper:
        candidates.append(cursor)
        if limit is not None and len(candidates) >= limit:
            break
        cursor = advance(cursor, interval.unit, interval.amount, tz)

    return candidates


def prefer_previous(previous_count: int, current_count: int, average_ticks: float) -> bool:
    """
    Decide whether the coarser interval is the better fit

    The coarser interval wins when it misses the target by strictly less
    than the finer interval overshoots it.
    """
    return average_ticks - previous_count < current_count - average_ticks


def select_interval(
    lower: int,
    upper: int,
    average_ticks: float,
    tz: tzinfo = timezone.utc,
    catalog: tuple[Interval, ...] = INTERVAL_CATALOG,
) -> IntervalSelection:
    """
    Walk the catalog coarsest first and choose the tick interval

    The walk stops at the first interval producing more than average_ticks
    candidates; that interval competes with the previous (coarser) one and
    the closer of the two is chosen. If no interval gets there, the finest
    interval is used.

    Args:
        lower: Range lower bound
        upper: Range upper bound
        average_ticks: Target tick count (axis length / tick gap)
        tz: Timezone for wall-clock steps
        catalog: Interval catalog, coarsest first

    Returns:
        IntervalSelection with the chosen interval and its candidates
    """
    previous: Optional[tuple[Interval, list[int]]] = None
    candidates: list[int] = []

    for interval in catalog:
        limit = None
        if previous is not None:
            # Past this count the previous interval is guaranteed to win
            limit = math.floor(max(average_ticks, 2 * average_ticks - len(previous[1]))) + 1

        candidates = collect_candidates(lower, upper, interval, tz, limit)

        if len(candidates) > average_ticks:
            if previous is None:
                return IntervalSelection(interval, tuple(candidates), average_ticks)

            previous_interval, previous_candidates = previous
            if limit is not None and len(candidates) >= limit:
                return IntervalSelection(previous_interval, tuple(previous_candidates), average_ticks)

            if prefer_previous(len(previous_candidates), len(candidates), average_ticks):
                return IntervalSelection(previous_interval, tuple(previous_candidates), average_ticks)

            return IntervalSelection(interval, tuple(candidates), average_ticks)

        previous = (interval, candidates)

    return IntervalSelection(catalog[-1], tuple(candidates), average_ticks, fallback=True)
