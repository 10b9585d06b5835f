"""
Range error classifications for instant/pixel mapping.

These exceptions describe ranges that the mapping math cannot work with.
The caller can recover by padding or reordering the bounds.
"""

from typing import Optional, Dict, Any


class AxisRangeError(Exception):
    """Base class for ranges the axis cannot map."""

    def __init__(self, message: str, lower: Optional[int] = None,
                 upper: Optional[int] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.lower = lower
        self.upper = upper
        self.context = context or {}
        self.recoverable = True


class DegenerateRangeError(AxisRangeError):
    """Zero-width range; the bounds must be padded before mapping."""

    def __init__(self, message: str, axis_length: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.axis_length = axis_length


class InvertedRangeError(AxisRangeError):
    """Lower bound lies after the upper bound."""
