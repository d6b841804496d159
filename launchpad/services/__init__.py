"""Services for launchpad."""

from launchpad.services.binaries import BinaryResolver
from launchpad.services.context import Deployment, ServerState
from launchpad.services.executor import Executor
from launchpad.services.folders import FolderOps
from launchpad.services.processor import CommandProcessor
from launchpad.services.reporter import ConsoleReporter
from launchpad.services.transport import SSHTransport, TransportError

__all__ = [
    "BinaryResolver",
    "CommandProcessor",
    "ConsoleReporter",
    "Deployment",
    "Executor",
    "FolderOps",
    "ServerState",
    "SSHTransport",
    "TransportError",
]
