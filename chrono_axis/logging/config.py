"""
Centralized logging configuration for the chrono axis engine.

This module provides standardized logging configuration using structlog
for all components. The library itself never configures logging on import;
hosts call configure_logging once at startup.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the host application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_planner_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the tick planning subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for tick planning decisions
    """
    logger = get_logger(name)

    return logger.bind(subsystem="tick_planner")


def log_interval_selection(
    logger: FilteringBoundLogger,
    interval_name: str,
    tick_count: int,
    average_ticks: float,
    lower: int,
    upper: int,
    fallback: bool = False,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a tick interval selection with standardized format.

    Args:
        logger: Structlog logger instance
        interval_name: Name of the selected catalog interval
        tick_count: Number of ticks in the final plan
        average_ticks: Target tick count derived from the axis length
        lower: Lower bound of the planned range
        upper: Upper bound of the planned range
        fallback: True if the catalog was exhausted
        context: Additional context data
    """
    bound_logger = logger.bind(
        interval=interval_name,
        tick_count=tick_count,
        average_ticks=round(average_ticks, 3),
        lower=lower,
        upper=upper,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if fallback:
        bound_logger.debug("Interval catalog exhausted, using finest interval")
    else:
        bound_logger.debug("Tick interval selected")
