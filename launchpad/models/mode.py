"""Execution mode data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionMode:
    """Flags governing a single executor call.

    Built fresh on every call, never stored between calls.
    """

    pretend: bool = False
    verbose: bool = False
    silent: bool = False

    @property
    def simulate(self) -> bool:
        """Whether the batch is recorded instead of executed."""
        return self.pretend and not self.silent
