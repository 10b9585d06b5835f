"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..errors import UnknownTimezoneError
from ..utils.time import resolve_timezone


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_axis_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate axis parameters."""
        errors = []

        if "average_tick_gap" in params:
            value = params["average_tick_gap"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="average_tick_gap",
                    message="Must be a positive number",
                    value=value
                ))

        if "timezone" in params:
            value = params["timezone"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="timezone",
                    message="Must be a timezone name",
                    value=value
                ))
            else:
                try:
                    resolve_timezone(value)
                except UnknownTimezoneError:
                    errors.append(ValidationError(
                        field="timezone",
                        message="Unknown timezone",
                        value=value
                    ))

        if "animation_duration_ms" in params:
            value = params["animation_duration_ms"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="animation_duration_ms",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_range_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate auto-ranging parameters."""
        errors = []

        if "pad_degenerate" in params:
            value = params["pad_degenerate"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="pad_degenerate",
                    message="Must be a boolean",
                    value=value
                ))

        if "min_span_ms" in params:
            value = params["min_span_ms"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="min_span_ms",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_label_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate label patterns."""
        errors = []

        for field_name, value in params.items():
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field=field_name,
                    message="Must be a non-empty format pattern",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "axis" in config:
            errors.extend(ConfigValidator.validate_axis_params(config["axis"]))

        if "range" in config:
            errors.extend(ConfigValidator.validate_range_params(config["range"]))

        if "labels" in config:
            errors.extend(ConfigValidator.validate_label_params(config["labels"]))

        return errors
