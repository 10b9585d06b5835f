"""Tick planner coordinating selection, evening, trimming and labels"""

from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import Range, Tick
from ..errors import InvalidParameterError
from ..logging.config import get_planner_logger, log_interval_selection
from ..models.plan import TickPlan
from ..utils.time import resolve_timezone
from .evening import make_dates_even
from .intervals import Interval
from .labels import TickLabelFormatter, format_tick
from .selection import select_interval
from .trimming import trim_edges

logger = get_planner_logger(__name__)


class TickPlanner:
    """
    Plans calendar-aligned ticks for a time range

    The planner keeps no state between calls: the selected interval is part
    of the returned TickPlan and has to be handed back for formatting.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.tz = resolve_timezone(self.config.axis.timezone)
        self.logger = logger

    def plan(
        self,
        lower: int,
        upper: int,
        axis_length: float,
        average_tick_gap: Optional[float] = None,
    ) -> TickPlan:
        """
        Plan ticks for [lower, upper] on an axis of axis_length pixels

        Args:
            lower: Range lower bound (instant)
            upper: Range upper bound (instant)
            axis_length: Axis length in pixels
            average_tick_gap: Preferred pixels between ticks, defaults to config

        Returns:
            TickPlan whose ticks are non-decreasing and end exactly at upper

        Raises:
            InvalidParameterError: For a non-positive tick gap or negative length
            InvertedRangeError: If lower is after upper
        """
        gap = self.config.axis.average_tick_gap if average_tick_gap is None else average_tick_gap
        if gap <= 0:
            raise InvalidParameterError(
                "Average tick gap must be positive",
                parameter="average_tick_gap",
                value=gap,
            )
        if axis_length < 0:
            raise InvalidParameterError(
                "Axis length must not be negative",
                parameter="axis_length",
                value=axis_length,
            )

        planned_range = Range(lower, upper)
        average_ticks = axis_length / gap

        selection = select_interval(lower, upper, average_ticks, self.tz)
        unit = selection.interval.unit

        # The upper bound is always a tick, aligned or not
        instants = list(selection.candidates)
        instants.append(upper)

        instants = make_dates_even(instants, unit, self.tz)
        instants = trim_edges(instants)

        ticks = tuple(Tick(instant, unit, ordinal) for ordinal, instant in enumerate(instants))

        log_interval_selection(
            self.logger,
            interval_name=selection.interval.name,
            tick_count=len(ticks),
            average_ticks=average_ticks,
            lower=lower,
            upper=upper,
            fallback=selection.fallback,
        )

        return TickPlan(
            ticks=ticks,
            selected_interval=selection.interval,
            average_ticks=average_ticks,
            range=planned_range,
            fallback=selection.fallback,
        )

    def format_tick(
        self,
        instant: int,
        selected_interval: Interval,
        custom_formatter: Optional[TickLabelFormatter] = None,
    ) -> str:
        """Format a tick label in the planner's timezone"""
        return format_tick(
            instant,
            selected_interval,
            custom_formatter=custom_formatter,
            tz=self.tz,
            params=self.config.labels,
        )

    def format_plan(
        self,
        plan: TickPlan,
        custom_formatter: Optional[TickLabelFormatter] = None,
    ) -> list[str]:
        """Format every tick of a plan with the plan's own interval"""
        return [
            self.format_tick(tick.instant, plan.selected_interval, custom_formatter)
            for tick in plan.ticks
        ]


def plan_ticks(
    lower: int,
    upper: int,
    axis_length: float,
    average_tick_gap: Optional[float] = None,
    config: Optional[DefaultConfig] = None,
) -> TickPlan:
    """Plan ticks with a one-off planner"""
    return TickPlanner(config).plan(lower, upper, axis_length, average_tick_gap)
