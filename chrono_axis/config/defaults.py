"""Default configuration parameters for the time axis."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AxisParams:
    """Tick density and calendar parameters."""
    average_tick_gap: float = 100.0                 # Preferred pixels between ticks
    timezone: str = "UTC"                           # Calendar fields are read here
    animation_duration_ms: int = 700                # Range change animation length


@dataclass(frozen=True)
class RangeParams:
    """Auto-ranging parameters."""
    pad_degenerate: bool = True                     # Widen zero-width data ranges
    min_span_ms: int = 1000                         # Minimum span after padding


@dataclass(frozen=True)
class LabelParams:
    """Tick label patterns (strftime)."""
    year_format: str = "%Y"
    month_format: str = "%b %y"
    medium_date_format: str = "%b %d, %Y"
    short_time_format: str = "%H:%M"
    medium_time_format: str = "%H:%M:%S"
    full_time_format: str = "%H:%M:%S.{millis} %Z"  # {millis} is zero-padded milliseconds


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    axis: AxisParams
    range: RangeParams
    labels: LabelParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        axis=AxisParams(),
        range=RangeParams(),
        labels=LabelParams(),
    )
