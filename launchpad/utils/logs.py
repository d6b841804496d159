"""Logging setup for the launchpad package."""

import logging
import os
import sys

from launchpad.utils.console import ColorfulFormatter


def configure_logging() -> logging.Logger:
    """Configure colorful logging for the launchpad package.

    Environment:
        LAUNCHPAD_LOG_LEVEL: Level name, defaults to INFO
        LAUNCHPAD_LOG_COLORS: Set to "false" to disable colors

    Returns:
        The package logger
    """
    log_level = os.getenv("LAUNCHPAD_LOG_LEVEL", "INFO").upper()
    use_colors = os.getenv("LAUNCHPAD_LOG_COLORS", "true").lower() != "false"

    # Disable colors if not a TTY
    if not sys.stderr.isatty():
        use_colors = False

    package_logger = logging.getLogger("launchpad")
    package_logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    logging.getLogger("asyncssh").setLevel(logging.WARNING)

    return package_logger
