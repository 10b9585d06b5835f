"""
Data range derivation and padding for auto-ranging axes.
"""

from collections.abc import Iterable
from typing import Optional

from ..errors import InvalidParameterError
from ..utils.time import now_instant
from .models import Range


def data_range(instants: Iterable[int], now: Optional[int] = None) -> Range:
    """
    Derive the range covered by a set of data instants.

    An empty data set yields a single-point range at the current time and a
    single instant yields a single-point range at that instant. Neither is
    an error; the result should be padded before mapping.

    Args:
        instants: Data instants in any order
        now: Instant used for the empty case, defaults to the wall clock

    Returns:
        Range from the earliest to the latest instant
    """
    ordered = sorted(instants)

    if not ordered:
        point = now if now is not None else now_instant()
        return Range(point, point)

    return Range(ordered[0], ordered[-1])


def pad_range(value: Range, min_span_ms: int) -> Range:
    """
    Widen a range to at least min_span_ms, keeping it centered.

    Ranges that are already wide enough are returned unchanged. Any odd
    millisecond left over goes to the upper side.

    Raises:
        InvalidParameterError: If min_span_ms is not positive
    """
    if min_span_ms <= 0:
        raise InvalidParameterError(
            "Minimum span must be positive",
            parameter="min_span_ms",
            value=min_span_ms,
        )

    missing = min_span_ms - value.span
    if missing <= 0:
        return value

    below = missing // 2
    return Range(value.lower - below, value.upper + (missing - below))
