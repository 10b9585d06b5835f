"""Data models for tick planning results"""

from dataclasses import dataclass

from ..data.models import Range, Tick
from ..ticks.intervals import Interval


@dataclass(frozen=True)
class TickPlan:
    """Ticks for one range together with the interval that produced them"""
    ticks: tuple[Tick, ...]
    selected_interval: Interval
    average_ticks: float
    range: Range
    fallback: bool = False

    @property
    def instants(self) -> list[int]:
        """Plain tick instants, non-decreasing, ending at the upper bound"""
        return [tick.instant for tick in self.ticks]

    @property
    def keys(self) -> list[tuple[int, int, int]]:
        """Tick identities for rendering layers that deduplicate"""
        return [tick.key for tick in self.ticks]

    def __len__(self) -> int:
        return len(self.ticks)


@dataclass(frozen=True)
class AxisLayout:
    """Everything a host needs to paint the axis"""
    plan: TickPlan
    positions: tuple[float, ...]    # Pixel offset per tick
    labels: tuple[str, ...]         # Label per tick

    @property
    def selected_interval(self) -> Interval:
        return self.plan.selected_interval

    def entries(self) -> list[tuple[Tick, float, str]]:
        """(tick, position, label) triples in tick order"""
        return list(zip(self.plan.ticks, self.positions, self.labels))
