"""Console implementation of the reporter protocol."""

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

from launchpad.utils.console import COLORS

logger = logging.getLogger(__name__)


@dataclass
class ConsoleReporter:
    """Report progress on the terminal and read answers from stdin."""

    options: dict[str, Any] = field(default_factory=dict)
    interactive: bool = True
    use_colors: bool = True
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    error_stream: TextIO = field(default_factory=lambda: sys.stderr)

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def option(self, name: str) -> Any:
        return self.options.get(name)

    def ask(self, prompt: str) -> str | None:
        """Ask the operator a question, None when not interactive."""
        if not self.interactive:
            logger.debug("Skipping prompt in non-interactive mode: %s", prompt)
            return None
        try:
            answer = input(f"{self._colorize(prompt, COLORS['bright_cyan'])} ")
        except EOFError:
            logger.warning("No input available for prompt: %s", prompt)
            return None
        return answer.strip() or None

    def comment(self, text: str) -> None:
        print(self._colorize(text, COLORS["bright_green"]), file=self.stream)

    def error(self, text: str) -> None:
        print(self._colorize(text, COLORS["bright_red"]), file=self.error_stream)

    def line(self, text: str) -> None:
        print(text, file=self.stream)
