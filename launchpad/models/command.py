"""Shell command data models."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from launchpad.utils.shell import quote_arg


@dataclass(frozen=True)
class Command:
    """A single shell instruction with quoted arguments.

    The program is emitted as-is, every argument goes through shell
    quoting so folder and path values cannot inject extra commands.

    Example:
        >>> str(Command.of("mkdir", "-p", "/var/www/my app"))
        "mkdir -p '/var/www/my app'"
    """

    program: str
    args: tuple[str, ...] = ()

    @classmethod
    def of(cls, program: str, *args: str) -> "Command":
        """Build a command from a program name and its arguments."""
        return cls(program=program, args=tuple(args))

    def __str__(self) -> str:
        return " ".join([self.program, *(quote_arg(arg) for arg in self.args)])


CommandLike = Union[str, Command]
Commands = Union[CommandLike, Sequence[CommandLike]]


def as_batch(commands: Commands) -> list[str]:
    """Wrap a lone command into a batch and render every entry to text."""
    if isinstance(commands, (str, Command)):
        commands = [commands]
    return [str(command) for command in commands]
