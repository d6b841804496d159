"""Data models for launchpad."""

from launchpad.models.command import Command, CommandLike, Commands, as_batch
from launchpad.models.history import HistoryEntry
from launchpad.models.mode import ExecutionMode
from launchpad.models.ssh import SSHHost

__all__ = [
    "as_batch",
    "Command",
    "CommandLike",
    "Commands",
    "ExecutionMode",
    "HistoryEntry",
    "SSHHost",
]
