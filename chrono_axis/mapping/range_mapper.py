"""
Instant to pixel mapping for a time axis.

Both directions are pure functions of the bounds they are given. Hosts pass
the currently displayed bounds, which may be mid-animation, rather than the
final target bounds.
"""

from dataclasses import dataclass

from ..errors import DegenerateRangeError


def _range_width(lower: int, upper: int, axis_length: float) -> float:
    diff = upper - lower
    if diff == 0:
        raise DegenerateRangeError(
            "Cannot map a zero-width range; pad the bounds first",
            lower=lower,
            upper=upper,
            axis_length=axis_length,
        )
    return float(diff)


def display_position(
    date: int,
    lower: int,
    upper: int,
    axis_length: float,
    is_vertical: bool = False,
) -> float:
    """
    Pixel offset of an instant along the axis.

    Horizontal axes grow left to right. Vertical axes are inverted since
    pixel y grows downwards while time grows upwards.

    Args:
        date: Instant to place
        lower: Current lower bound
        upper: Current upper bound
        axis_length: Axis length in pixels
        is_vertical: True for a vertical axis

    Returns:
        Pixel offset, within [0, axis_length] for instants inside the range

    Raises:
        DegenerateRangeError: If lower == upper
    """
    diff = _range_width(lower, upper, axis_length)
    fraction = (date - lower) / diff

    if is_vertical:
        return axis_length - fraction * axis_length
    return fraction * axis_length


def value_for_display(
    pixel: float,
    lower: int,
    upper: int,
    axis_length: float,
    is_vertical: bool = False,
) -> int:
    """
    Instant shown at a pixel offset; inverse of display_position.

    The result is rounded to the nearest millisecond.

    Raises:
        DegenerateRangeError: If lower == upper or axis_length is zero
    """
    diff = _range_width(lower, upper, axis_length)
    if axis_length == 0:
        raise DegenerateRangeError(
            "Cannot map pixels on a zero-length axis",
            lower=lower,
            upper=upper,
            axis_length=axis_length,
        )

    if is_vertical:
        fraction = (axis_length - pixel) / axis_length
    else:
        fraction = pixel / axis_length

    return lower + round(fraction * diff)


@dataclass(frozen=True)
class RangeMapper:
    """Mapping bound to one set of current bounds and axis geometry."""
    lower: int
    upper: int
    axis_length: float
    vertical: bool = False

    @property
    def zero_position(self) -> float:
        """Pixel offset of the axis origin; a time axis has no zero value."""
        return 0.0

    def map_to_pixel(self, instant: int) -> float:
        return display_position(instant, self.lower, self.upper, self.axis_length, self.vertical)

    def map_from_pixel(self, pixel: float) -> int:
        return value_for_display(pixel, self.lower, self.upper, self.axis_length, self.vertical)

    def is_value_on_axis(self, instant: int) -> bool:
        """True if the instant lies strictly between the current bounds."""
        return self.lower < instant < self.upper

    @staticmethod
    def to_numeric_value(instant: int) -> float:
        return float(instant)

    @staticmethod
    def to_real_value(value: float) -> int:
        """Truncate a numeric axis value to an instant."""
        return int(value)
