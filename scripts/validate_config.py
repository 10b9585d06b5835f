#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import yaml

from chrono_axis.config.loader import ConfigLoader
from chrono_axis.config.validation import ConfigValidator, ValidationError


def configured_axes(loader: ConfigLoader) -> List[str]:
    """List axis ids present in axes.yaml."""
    axes_file = loader.config_dir / "axes.yaml"
    if not axes_file.exists():
        return []

    with open(axes_file) as f:
        data = yaml.safe_load(f) or {}

    return sorted((data.get("axes") or {}).keys())


def validate_axis_config(loader: ConfigLoader, axis_id: str) -> List[ValidationError]:
    """Validate configuration for a specific axis."""
    config = loader.merge_config(axis_id)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("Validating chrono axis configuration...")

    loader = ConfigLoader.create()

    # Unknown ids fall back to the defaults
    axis_ids = configured_axes(loader) + ["UNKNOWN-AXIS"]

    all_valid = True

    for axis_id in axis_ids:
        print(f"\nValidating {axis_id}...")

        try:
            errors = validate_axis_config(loader, axis_id)

            if errors:
                print(f"Found {len(errors)} validation errors:")
                for error in errors:
                    print(f"  - {error.field}: {error.message} (value: {error.value})")
                all_valid = False
            else:
                print(f"{axis_id} configuration is valid")

        except yaml.YAMLError as e:
            print(f"Error reading configuration for {axis_id}: {e}")
            all_valid = False

    if all_valid:
        print("\nAll configuration validation passed!")
        sys.exit(0)
    else:
        print("\nConfiguration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
