"""Linear mapping between instants and pixel offsets"""

from .range_mapper import RangeMapper, display_position, value_for_display

__all__ = ["RangeMapper", "display_position", "value_for_display"]
