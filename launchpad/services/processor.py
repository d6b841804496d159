"""Normalization of logical commands into remote shell text."""

import os

from launchpad.models import Commands, as_batch
from launchpad.protocols import DeploymentContext, ServerContext
from launchpad.utils.shell import quote_arg


class CommandProcessor:
    """Shape commands for the remote host and current stage."""

    def __init__(
        self,
        server: ServerContext,
        deployment: DeploymentContext,
        cli_name: str = "artisan",
        local_separator: str = os.sep,
    ) -> None:
        self.server = server
        self.deployment = deployment
        self.cli_name = cli_name
        self.local_separator = local_separator

    def process(self, commands: Commands) -> list[str]:
        """Turn one command or a batch into the exact strings to send.

        Args:
            commands: A command or an ordered sequence of commands

        Returns:
            Non-empty batch of shell commands

        Raises:
            ValueError: If the batch is empty
        """
        batch = as_batch(commands)
        if not batch:
            raise ValueError("Cannot process an empty command batch")

        stage = self.deployment.get_stage()
        separator = self.server.get_separator()

        processed = []
        for command in batch:
            if self.local_separator != separator:
                command = command.replace(self.local_separator, separator)

            # Tag application CLI calls with the stage
            if stage and self.cli_name in command:
                command += f" --env={quote_arg(stage)}"

            processed.append(command)

        return processed
