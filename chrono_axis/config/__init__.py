"""Axis configuration: defaults, YAML overrides and validation."""
