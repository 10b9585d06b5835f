"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import AxisParams, DefaultConfig, LabelParams, RangeParams, get_default_config


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_axis_config(self, axis_id: str) -> dict[str, Any]:
        """Load axis-specific configuration overrides."""
        axes_file = self.config_dir / "axes.yaml"

        if not axes_file.exists():
            return {}

        with open(axes_file) as f:
            axes_config = yaml.safe_load(f) or {}

        return axes_config.get("axes", {}).get(axis_id, {}) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        axis_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Axis-specific overrides from axes.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        axis_config = self.load_axis_config(axis_id)
        config = self._deep_merge(config, axis_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, axis_id: str, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge and build the typed configuration for an axis."""
        return build_config(self.merge_config(axis_id, overrides))

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(config: dict[str, Any]) -> DefaultConfig:
    """
    Build a typed configuration from a merged dictionary.

    Unknown keys inside a section are ignored; missing keys keep their
    defaults.
    """
    def section(params_cls: type, values: Optional[dict[str, Any]]) -> Any:
        values = values or {}
        known = {k: v for k, v in values.items() if k in params_cls.__dataclass_fields__}
        return params_cls(**known)

    return DefaultConfig(
        axis=section(AxisParams, config.get("axis")),
        range=section(RangeParams, config.get("range")),
        labels=section(LabelParams, config.get("labels")),
    )
