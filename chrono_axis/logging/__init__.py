"""
Logging configuration and utilities for the chrono axis engine.
"""
from .config import configure_logging, get_logger, get_planner_logger

__all__ = ["configure_logging", "get_logger", "get_planner_logger"]
