"""Execution history data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryEntry:
    """Record of one executed or simulated command batch."""

    commands: tuple[str, ...]
    output: str | list[str] | None = None
    simulated: bool = False

    @property
    def value(self) -> str | list[str] | tuple[str, ...]:
        """Output for executed batches, the batch itself for simulated ones."""
        if self.simulated:
            return self.commands
        return self.output if self.output is not None else ""
