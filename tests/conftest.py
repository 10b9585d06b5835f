"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from typing import Callable

from chrono_axis.ticks.planner import TickPlanner
from chrono_axis.utils.time import to_instant


def utc_ms(*args: int) -> int:
    """Instant for a UTC calendar date: utc_ms(2020, 1, 1, 12, 30)."""
    return to_instant(datetime(*args, tzinfo=timezone.utc))


@pytest.fixture
def ms() -> Callable[..., int]:
    """Build instants from UTC calendar fields."""
    return utc_ms


@pytest.fixture
def planner() -> TickPlanner:
    """Tick planner with the default configuration."""
    return TickPlanner()


@pytest.fixture
def christmas_range() -> tuple[int, int]:
    """Range starting a week before a new year, ending two years later."""
    return utc_ms(2013, 12, 25), utc_ms(2016, 1, 1)
