"""Global logger configuration for the genfp package."""

import logging
import sys

from genfp.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]


def setup_logger(
    name: str = "genfp",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.log_level
    format_string = format_string or settings.log_format

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children (``genfp.<component>``).

    Children inherit handlers and level from the package logger.
    """
    if not component:
        return logger
    return logger.getChild(component)


# Create default logger instance for the package
logger = setup_logger()
