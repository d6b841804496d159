"""Protocol interfaces for the collaborators of the execution core.

The executor, resolver and folder helpers never reach for global state:
everything they need is handed to them as one of these protocols, so each
collaborator can be swapped for a fake in tests.

Usage Example:

    from launchpad.protocols import RemoteTransport

    class RecordingTransport:
        def __init__(self):
            self.batches = []

        def run(self, commands, on_output):
            self.batches.append(list(commands))
            on_output("done\\n")

        def status(self):
            return 0

        def display(self, text):
            print(text)

    assert isinstance(RecordingTransport(), RemoteTransport)
"""

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

OutputCallback = Callable[[str], None]


@runtime_checkable
class RemoteTransport(Protocol):
    """Protocol for the shell session commands are sent through."""

    def run(self, commands: Sequence[str], on_output: OutputCallback) -> None:
        """Run a batch of commands, streaming output chunks.

        Args:
            commands: Ordered shell commands run as one unit
            on_output: Called synchronously with each output chunk

        Raises:
            TransportError: If the remote host cannot be reached
        """
        ...

    def status(self) -> int:
        """Exit status of the last batch that ran."""
        ...

    def display(self, text: str) -> None:
        """Echo text to the operator."""
        ...


@runtime_checkable
class ServerContext(Protocol):
    """Protocol for per-server settings and conventions."""

    def get_value(self, key: str) -> Any:
        """Read a stored value, None when missing."""
        ...

    def set_value(self, key: str, value: Any) -> None:
        """Store a value for the rest of the run."""
        ...

    def get_separator(self) -> str:
        """Path separator used on the remote host."""
        ...

    def get_line_endings(self) -> str:
        """Line ending used in the remote host's output."""
        ...


@runtime_checkable
class DeploymentContext(Protocol):
    """Protocol for deployment layout and environment."""

    def get_folder(self, folder: str | None = None) -> str:
        """Resolve a logical folder name to an absolute remote path."""
        ...

    def get_stage(self) -> str | None:
        """Current stage, or None when no stage is set."""
        ...

    def get_path(self, binary: str) -> str | None:
        """Known location of a binary, or None."""
        ...


@runtime_checkable
class Reporter(Protocol):
    """Protocol for the interactive surface.

    A missing reporter (None) stands for a non-interactive context.
    """

    def option(self, name: str) -> Any:
        """Read a run-mode flag such as ``pretend`` or ``verbose``."""
        ...

    def ask(self, prompt: str) -> str | None:
        """Request input from the operator."""
        ...

    def comment(self, text: str) -> None:
        """Emit a status message."""
        ...

    def error(self, text: str) -> None:
        """Emit an error message."""
        ...

    def line(self, text: str) -> None:
        """Emit plain text."""
        ...


__all__ = [
    "DeploymentContext",
    "OutputCallback",
    "RemoteTransport",
    "Reporter",
    "ServerContext",
]
