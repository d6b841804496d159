"""Command execution facade used by every deployment task.

Every batch goes through the same path:

1. Normalize through the CommandProcessor (separators, stage flag)
2. Read the execution mode from the reporter (pretend, verbose)
3. Either simulate (pretend) or send to the transport, streaming output
4. Shape the output (trimmed string or list of non-empty lines)
5. Record the result in history unless silent
"""

import logging
import sys
from typing import Any

from launchpad.models import Commands, ExecutionMode, HistoryEntry, as_batch
from launchpad.models.command import Command, CommandLike
from launchpad.protocols import (
    DeploymentContext,
    RemoteTransport,
    Reporter,
    ServerContext,
)
from launchpad.services.processor import CommandProcessor

logger = logging.getLogger(__name__)

Output = str | list[str]


class Executor:
    """Run commands on the remote host and keep a history of batches."""

    def __init__(
        self,
        transport: RemoteTransport,
        server: ServerContext,
        deployment: DeploymentContext,
        processor: CommandProcessor,
        reporter: Reporter | None = None,
    ) -> None:
        self.transport = transport
        self.server = server
        self.deployment = deployment
        self.processor = processor
        self.reporter = reporter
        self._history: list[HistoryEntry] = []

    @property
    def history(self) -> list[HistoryEntry]:
        """Batches run (or simulated) so far, oldest first."""
        return list(self._history)

    def clear_history(self) -> None:
        """Forget all recorded batches."""
        self._history.clear()

    def option(self, name: str) -> Any:
        """Read a run-mode flag, None without a reporter."""
        return self.reporter.option(name) if self.reporter else None

    def mode(self, silent: bool = False) -> ExecutionMode:
        """Build the execution mode for one call."""
        return ExecutionMode(
            pretend=bool(self.option("pretend")),
            verbose=bool(self.option("verbose")) and not silent,
            silent=silent,
        )

    def run(
        self,
        commands: Commands,
        silent: bool = False,
        as_list: bool = False,
    ) -> Output:
        """Run commands on the remote server and gather the output.

        Args:
            commands: One command or an ordered batch
            silent: Keep the call out of history and never echo output
            as_list: Return non-empty output lines instead of a string

        Returns:
            Trimmed output, or its non-empty lines when as_list is set.
            In pretend mode, the processed batch instead.
        """
        batch = self.processor.process(commands)
        mode = self.mode(silent)

        if mode.simulate:
            return self._simulate(batch, as_list)

        logger.debug("Running batch: %s", batch)
        output = self._execute(batch, echo=mode.verbose)
        result = self._shape(output, as_list)

        if not mode.silent:
            self._history.append(HistoryEntry(commands=tuple(batch), output=result))

        return result

    def run_raw(self, commands: Commands, as_list: bool = False) -> Output:
        """Run commands exactly as given, bypassing processing and history.

        Args:
            commands: One command or an ordered batch
            as_list: Return non-empty output lines instead of a string

        Returns:
            Untrimmed output, or its non-empty lines when as_list is set
        """
        batch = as_batch(commands)
        logger.debug("Running raw batch: %s", batch)
        output = self._execute(batch, echo=False)

        if as_list:
            return self._split(output)
        return output

    def run_silently(self, commands: Commands, as_list: bool = False) -> Output:
        """Run commands without recording or echoing them."""
        return self.run(commands, silent=True, as_list=as_list)

    def run_in_folder(
        self,
        folder: str | None = None,
        tasks: Commands = (),
    ) -> Output:
        """Run commands from within a folder of the deployment."""
        if isinstance(tasks, (str, Command)):
            tasks = [tasks]

        batch: list[CommandLike] = [
            Command.of("cd", self.deployment.get_folder(folder)),
            *tasks,
        ]
        return self.run(batch)

    def check_status(
        self,
        error: str,
        output: Output | None = None,
        success: str | None = None,
    ) -> Output | None | bool:
        """Check the exit status of the last batch.

        Args:
            error: Message reported when the status is nonzero
            output: The batch's output, handed back on success
            success: Message reported when the status is zero

        Returns:
            The output on success, False otherwise
        """
        status = self.transport.status()

        if status == 0:
            if success:
                self._comment(success)
            return output

        logger.debug("Last batch exited with status %d", status)
        self._error(error)
        print(self._stringify(output), file=sys.stderr)
        return False

    def _execute(self, batch: list[str], echo: bool) -> str:
        """Send a batch to the transport and accumulate its output."""
        chunks: list[str] = []

        def on_output(chunk: str) -> None:
            chunks.append(chunk)
            if echo:
                text = chunk.rstrip()
                if text:
                    self.transport.display(text)

        self.transport.run(batch, on_output)
        return "".join(chunks)

    def _simulate(self, batch: list[str], as_list: bool) -> Output:
        """Record a batch without running it."""
        logger.debug("Pretending to run batch: %s", batch)
        if self.reporter:
            self.reporter.line("\n".join(batch))

        self._history.append(HistoryEntry(commands=tuple(batch), simulated=True))

        if as_list:
            return list(batch)
        return "\n".join(batch)

    def _shape(self, output: str, as_list: bool) -> Output:
        if as_list:
            return self._split(output)
        return output.strip()

    def _split(self, output: str) -> list[str]:
        return [line for line in output.split(self.server.get_line_endings()) if line]

    @staticmethod
    def _stringify(output: Output | None) -> str:
        if output is None:
            return ""
        if isinstance(output, list):
            return "\n".join(output)
        return output

    def _comment(self, text: str) -> None:
        if self.reporter:
            self.reporter.comment(text)
        else:
            logger.info(text)

    def _error(self, text: str) -> None:
        if self.reporter:
            self.reporter.error(text)
        else:
            logger.error(text)
