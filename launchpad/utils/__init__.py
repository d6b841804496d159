"""Utilities for launchpad."""

from launchpad.utils.console import ColorfulFormatter
from launchpad.utils.logs import configure_logging
from launchpad.utils.shell import join_commands, quote_arg, quote_path

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "join_commands",
    "quote_arg",
    "quote_path",
]
