"""Global logger configuration for the Mimic project."""

import logging
import sys

from mimic.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "mimic",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        stream = sys.stderr if settings.LOG_STREAM == "stderr" else sys.stdout
        handler = logging.StreamHandler(stream)
        formatter = logging.Formatter(fmt=format_string, datefmt=settings.LOG_DATEFMT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Create default logger instance for the project
logger = setup_logger()
