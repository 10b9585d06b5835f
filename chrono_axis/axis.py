"""
Time axis coordinator.

Owns the ranging policy of a single axis (auto-ranging from data or fixed
bounds), the currently displayed bounds, and the optional custom label
formatter, and turns them into a complete layout on request:
Bounds → Tick Plan → Pixel Positions → Labels
"""

from collections.abc import Callable, Iterable
from typing import Any, Optional, Protocol

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .data.models import Range
from .data.ranging import data_range, pad_range
from .errors import MissingBoundError
from .mapping.range_mapper import RangeMapper
from .models.plan import AxisLayout
from .ticks.labels import TickLabelFormatter
from .ticks.planner import TickPlanner

logger = structlog.get_logger(__name__)


class BoundsAnimator(Protocol):
    """Host service interpolating two numeric bounds over time."""

    def animate(
        self,
        start: Range,
        end: Range,
        duration_ms: int,
        on_update: Callable[[float, float], None],
    ) -> Any:
        """Start interpolating; returns an id accepted by stop()."""

    def stop(self, animation_id: Any) -> None:
        """Stop a running animation."""


class TimeAxis:
    """
    A time axis with auto-ranging or fixed bounds.

    Target bounds are what the axis is moving to; current bounds are what is
    on screen right now and drive the pixel mapping. Without animation the
    two are always equal.
    """

    def __init__(
        self,
        lower: Optional[int] = None,
        upper: Optional[int] = None,
        config: Optional[DefaultConfig] = None,
        tick_label_formatter: Optional[TickLabelFormatter] = None,
        vertical: bool = False,
        animator: Optional[BoundsAnimator] = None,
    ) -> None:
        """
        Initialize the axis.

        Passing both bounds turns auto-ranging off; otherwise the range is
        derived from the data given to invalidate_range().
        """
        self.config = config or get_default_config()
        self.planner = TickPlanner(self.config)
        self.logger = logger

        self.auto_ranging = lower is None or upper is None
        self.lower_bound = lower
        self.upper_bound = upper
        self.tick_label_formatter = tick_label_formatter
        self.vertical = vertical
        self.animator = animator

        self._data_range: Optional[Range] = None
        self._current_lower = lower
        self._current_upper = upper
        self._animation_id: Any = None

    def invalidate_range(self, instants: Iterable[int], now: Optional[int] = None) -> Range:
        """
        Record the data the axis has to cover.

        Empty data covers only the current time and a single instant covers
        only itself; both give a single-point range.
        """
        self._data_range = data_range(instants, now)
        return self._data_range

    def auto_range(self) -> Range:
        """
        Range the axis should show next.

        Raises:
            MissingBoundError: If auto-ranging is off and a bound is missing
        """
        if self.auto_ranging:
            if self._data_range is None:
                self._data_range = data_range([])

            result = self._data_range
            if self.config.range.pad_degenerate:
                result = pad_range(result, self.config.range.min_span_ms)
            elif result.is_degenerate:
                self.logger.warning(
                    "Degenerate auto range with padding disabled",
                    lower=result.lower,
                    upper=result.upper,
                )
            return result

        missing = [
            name for name, value in (("lower", self.lower_bound), ("upper", self.upper_bound))
            if value is None
        ]
        if missing:
            raise MissingBoundError(
                "If auto-ranging is off, a lower and upper bound must be set",
                missing=missing,
            )

        return Range(self.lower_bound, self.upper_bound)

    def set_range(self, new_range: Range, animating: bool = False) -> None:
        """
        Move the axis to a new target range.

        With animating set and an animator available, the current bounds are
        interpolated from the previous target to the new one; any running
        animation is stopped first.
        """
        old_lower, old_upper = self.lower_bound, self.upper_bound
        self.lower_bound = new_range.lower
        self.upper_bound = new_range.upper

        can_animate = (
            animating
            and self.animator is not None
            and old_lower is not None
            and old_upper is not None
        )

        if can_animate:
            if self._animation_id is not None:
                self.animator.stop(self._animation_id)
            self._animation_id = self.animator.animate(
                Range(old_lower, old_upper),
                new_range,
                self.config.axis.animation_duration_ms,
                self.set_current_bounds,
            )
        else:
            self.set_current_bounds(new_range.lower, new_range.upper)

        self.logger.debug(
            "Axis range set",
            lower=new_range.lower,
            upper=new_range.upper,
            animating=can_animate,
        )

    def set_current_bounds(self, lower: float, upper: float) -> None:
        """Update the displayed bounds; animators call this on every frame."""
        self._current_lower = round(lower)
        self._current_upper = round(upper)

    @property
    def current_range(self) -> Range:
        """
        Bounds currently on screen.

        Raises:
            MissingBoundError: If the axis has never been ranged
        """
        if self._current_lower is None or self._current_upper is None:
            raise MissingBoundError(
                "Axis has no current bounds yet",
                missing=[
                    name for name, value in
                    (("lower", self._current_lower), ("upper", self._current_upper))
                    if value is None
                ],
            )
        return Range(self._current_lower, self._current_upper)

    def mapper(self, axis_length: float) -> RangeMapper:
        """Mapping for the current bounds and the given length."""
        current = self.current_range
        return RangeMapper(current.lower, current.upper, axis_length, self.vertical)

    def layout(self, axis_length: float, animate: bool = False) -> AxisLayout:
        """
        Compute ticks, their pixel positions and labels.

        Ticks are planned over the target range; positions use the current
        bounds, so they follow an animation in progress. The range is only
        set again when the auto-ranged target has moved, so hosts can call
        this on every animation frame.

        Raises:
            MissingBoundError: If auto-ranging is off and a bound is missing
            DegenerateRangeError: If the current range has zero width
        """
        target = self.auto_range()

        if self.auto_ranging:
            if (target.lower, target.upper) != (self.lower_bound, self.upper_bound):
                self.set_range(target, animating=animate)
        else:
            self.set_current_bounds(target.lower, target.upper)

        plan = self.planner.plan(target.lower, target.upper, axis_length)
        mapper = self.mapper(axis_length)

        positions = tuple(mapper.map_to_pixel(tick.instant) for tick in plan.ticks)
        labels = tuple(self.planner.format_plan(plan, self.tick_label_formatter))

        return AxisLayout(plan=plan, positions=positions, labels=labels)
