"""Discovery of executables on the remote host."""

import logging
from collections.abc import Callable

from launchpad.models import Command
from launchpad.protocols import DeploymentContext, Reporter, ServerContext
from launchpad.services.executor import Executor

logger = logging.getLogger(__name__)

Strategy = Callable[[], str | bool | None]


class BinaryResolver:
    """Locate binaries through an ordered chain of strategies.

    Strategies, first non-empty result wins:

    1. Path cached on the server during this run
    2. Path configured for the deployment
    3. ``which <binary>`` on the remote host
    4. ``which <fallback>`` when a fallback is given
    5. Asking the operator, when a reporter is available

    Whatever the chain returns, False included, is cached under
    ``paths.<binary>`` so later lookups skip the chain entirely.
    """

    def __init__(
        self,
        executor: Executor,
        server: ServerContext,
        deployment: DeploymentContext,
        reporter: Reporter | None = None,
        runtime_binary: str = "php",
        cli_name: str = "artisan",
    ) -> None:
        self.executor = executor
        self.server = server
        self.deployment = deployment
        self.reporter = reporter
        self.runtime_binary = runtime_binary
        self.cli_name = cli_name

    @staticmethod
    def cache_key(binary: str) -> str:
        return f"paths.{binary}"

    def strategies(self, binary: str, fallback: str | None = None) -> list[Strategy]:
        """Build the lookup chain for a binary, cache lookup excluded."""
        chain: list[Strategy] = [
            lambda: self.deployment.get_path(binary),
            lambda: self._shell_which(binary),
        ]

        if fallback:
            chain.append(lambda: self._shell_which(fallback))

        if self.reporter is not None:
            reporter = self.reporter
            prompt = f"{binary} could not be found, please enter the path to it"
            chain.append(lambda: reporter.ask(prompt))

        return chain

    def which(
        self,
        binary: str,
        fallback: str | None = None,
        refresh: bool = False,
    ) -> str | bool:
        """Find the path to a binary.

        Args:
            binary: Name of the binary
            fallback: Alternative name to look up with ``which``
            refresh: Ignore any cached result and run the chain again

        Returns:
            Path to the binary, False if it could not be found
        """
        key = self.cache_key(binary)

        if not refresh:
            cached = self.server.get_value(key)
            if cached is not None:
                return cached or False

        location: str | bool | None = None
        for strategy in self.strategies(binary, fallback):
            location = strategy()
            if location:
                break

        resolved = location or False
        self.server.set_value(key, resolved)

        if resolved:
            logger.info("Resolved %s to %s", binary, resolved)
        else:
            logger.warning("Could not resolve binary %s", binary)

        return resolved

    def runtime(self, command: str | Command | None = None) -> str:
        """Prefix a command with the path to the runtime binary."""
        runtime = self.which(self.runtime_binary) or self.runtime_binary
        return f"{runtime} {command or ''}".strip()

    def cli(self, command: str | Command | None = None) -> str:
        """Prefix a command with the path to the application CLI."""
        cli = self.which(self.cli_name) or self.cli_name
        return self.runtime(f"{cli} {command or ''}".strip())

    def _shell_which(self, binary: str) -> str:
        return self.executor.run_silently(str(Command.of("which", binary)))
