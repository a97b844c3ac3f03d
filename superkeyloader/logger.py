"""Logging configuration for superkeyloader.

Supports two logging formats:
- Human readable logs (default), written to stderr
- JSON logging, for log aggregation systems
"""

import logging
import sys

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def verbosity_to_level(verbosity: int, default: str = "WARNING") -> str:
    """Map a -v flag count to a log level name.

    No flag keeps `default`, -v is INFO, -vv and more is DEBUG.
    """
    if verbosity <= 0:
        return default
    if verbosity == 1:
        return "INFO"
    return "DEBUG"


def setup_logging(level: str = "WARNING", *, json_format: bool = False) -> None:
    """Configure structlog for the whole process.

    Args:
        level: Minimum log level name (e.g., "INFO")
        json_format: Render JSON lines instead of colored console output
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[level]
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
