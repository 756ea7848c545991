"""Logging setup for the finlit package."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import config

PACKAGE_LOGGER = "finlit"


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Safe to call repeatedly; the handler is only added once.

    Args:
        level: Log level name (defaults to config.logging.log_level)
        fmt: Log format (defaults to config.logging.log_format)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel((level or config.logging.log_level).upper())

    if not any(getattr(h, "_finlit_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or config.logging.log_format))
        handler._finlit_handler = True
        logger.addHandler(handler)

    return logger
