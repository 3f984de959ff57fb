"""Global logger configuration for underbar."""

import logging
import sys
from typing import Optional

from .config import get_settings

__all__ = ["logger", "setup_logger", "get_logger"]


def setup_logger(
    name: str = "underbar",
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (the package name by default)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); falls back to UNDERBAR_LOG_LEVEL
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or get_settings().log_level
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

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


def get_logger(component: str) -> logging.Logger:
    """child logger under the package logger, e.g. underbar.scheduler"""
    return logger.getChild(component)


logger = setup_logger()
