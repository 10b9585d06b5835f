"""
Canonical data models for axis ranges and ticks.

Instants are plain integers (milliseconds since the Unix epoch); these
immutable structures wrap them where extra meaning is needed.
"""

from dataclasses import dataclass

from ..errors import InvertedRangeError
from ..utils.time import TimeUnit


@dataclass(frozen=True)
class Range:
    """Displayed time range with lower <= upper."""
    lower: int          # Instant, inclusive
    upper: int          # Instant, inclusive

    def __post_init__(self):
        if self.lower > self.upper:
            raise InvertedRangeError(
                f"Lower bound {self.lower} is after upper bound {self.upper}",
                lower=self.lower,
                upper=self.upper,
            )

    @property
    def span(self) -> int:
        """Width of the range in milliseconds."""
        return self.upper - self.lower

    @property
    def is_degenerate(self) -> bool:
        """True for a single-point range, which cannot be mapped."""
        return self.lower == self.upper


@dataclass(frozen=True)
class Tick:
    """
    A planned tick with an explicit identity.

    Rendering layers that cache labels by value must key on `key` rather
    than on the instant: two ticks may share an instant, and the same
    instant planned with a different unit needs a fresh label.
    """
    instant: int        # Tick position in time, never perturbed
    unit: TimeUnit      # Unit of the interval that produced the tick
    ordinal: int        # Position in the plan

    @property
    def key(self) -> tuple[int, int, int]:
        """Identity tuple unique within a plan and across units."""
        return (self.instant, self.unit.marker, self.ordinal)
