"""
Configuration error classifications.

These exceptions represent mistakes in how the axis was set up. They are
not recoverable without the caller changing its configuration.
"""

from typing import Any, Optional, Dict


class AxisConfigurationError(Exception):
    """Base class for invalid axis configuration."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MissingBoundError(AxisConfigurationError):
    """Auto-ranging is off but a lower or upper bound was not set."""

    def __init__(self, message: str, missing: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing = missing or []


class InvalidParameterError(AxisConfigurationError):
    """A planning parameter is outside its valid domain."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value


class UnknownTimezoneError(AxisConfigurationError):
    """Timezone name could not be resolved."""

    def __init__(self, message: str, timezone_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timezone_name = timezone_name
