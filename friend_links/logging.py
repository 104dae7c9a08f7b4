"""Logging configuration for the friend link generator."""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Set up logging for the ``friend_links`` package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
               Can be overridden with FRIEND_LINKS_LOG_LEVEL environment variable.

    Returns:
        The root friend_links logger.
    """
    if level is None:
        level = os.environ.get("FRIEND_LINKS_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("friend_links")
    logger.setLevel(log_level)

    # Avoid stacking handlers when the CLI is invoked repeatedly in one process
    for handler in list(logger.handlers):
        if getattr(handler, "_friend_links_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._friend_links_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    return logger
