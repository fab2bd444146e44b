"""Package logger configuration for kinds."""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "kinds"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(
    name: str = LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure console output for the kinds logger.

    The library itself only attaches a NullHandler; call this from an
    application or an example script to see the DEBUG trace of kind
    registration and lazy IO execution.

    Args:
        name: Logger name (the package logger by default)
        level: Log level, falls back to KINDS_LOG_LEVEL then INFO
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("KINDS_LOG_LEVEL", "INFO")
    format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    configured = logging.getLogger(name)

    # Only configure once; NullHandler does not count
    if not any(not isinstance(h, logging.NullHandler) for h in configured.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        configured.addHandler(handler)
        configured.setLevel(getattr(logging, level.upper()))
        configured.propagate = False

    return configured


__all__ = ("LOGGER_NAME", "logger", "setup_logger")
