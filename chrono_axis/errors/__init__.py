"""
Error classification for axis ranging and tick planning.

This module provides a structured exception hierarchy separating invalid
ranges handed to the mapping math from configuration mistakes made by the
caller.
"""

from .range_errors import (
    AxisRangeError,
    DegenerateRangeError,
    InvertedRangeError,
)
from .configuration import (
    AxisConfigurationError,
    MissingBoundError,
    InvalidParameterError,
    UnknownTimezoneError,
)

__all__ = [
    # Range Errors
    "AxisRangeError",
    "DegenerateRangeError",
    "InvertedRangeError",
    # Configuration Errors
    "AxisConfigurationError",
    "MissingBoundError",
    "InvalidParameterError",
    "UnknownTimezoneError",
]
