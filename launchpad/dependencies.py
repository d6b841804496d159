"""Dependency container for one deployment run.

Every collaborator of the execution core is built here and handed down
explicitly. Nothing is stored at module level: history and the binary
cache live exactly as long as the Dependencies instance.
"""

from dataclasses import dataclass

from launchpad.config import Config
from launchpad.protocols import RemoteTransport, Reporter
from launchpad.services.binaries import BinaryResolver
from launchpad.services.context import Deployment, ServerState
from launchpad.services.executor import Executor
from launchpad.services.folders import FolderOps
from launchpad.services.processor import CommandProcessor
from launchpad.services.reporter import ConsoleReporter
from launchpad.services.transport import SSHTransport


@dataclass
class Dependencies:
    """Container for the execution core of one run.

    Example:
        deps = Dependencies.create("production")
        try:
            deps.folders.create_folder("releases", recursive=True)
        finally:
            deps.close()
    """

    config: Config
    transport: RemoteTransport
    server: ServerState
    deployment: Deployment
    reporter: Reporter | None
    executor: Executor
    binaries: BinaryResolver
    folders: FolderOps

    @classmethod
    def create(cls, host_name: str, config: Config | None = None) -> "Dependencies":
        """Wire the core against an SSH host from the SSH config.

        Args:
            host_name: Host alias as written in the SSH config
            config: Custom Config instance, read from environment if omitted

        Raises:
            ValueError: If the host is not defined
        """
        config = config or Config()
        host = config.get_host(host_name)
        if host is None:
            raise ValueError(f"Unknown host: {host_name}")

        transport = SSHTransport(
            host,
            known_hosts=config.known_hosts_path,
            strict_host_key_checking=config.strict_host_key_checking,
        )
        reporter = ConsoleReporter(options=config.options, interactive=config.interactive)
        return cls.from_transport(transport, config=config, reporter=reporter)

    @classmethod
    def from_transport(
        cls,
        transport: RemoteTransport,
        config: Config | None = None,
        reporter: Reporter | None = None,
    ) -> "Dependencies":
        """Wire the core around an existing transport.

        Args:
            transport: Transport commands are sent through
            config: Custom Config instance, read from environment if omitted
            reporter: Interactive surface, None for non-interactive runs
        """
        config = config or Config()
        server = ServerState(separator=config.separator, line_endings=config.line_endings)
        deployment = Deployment(
            root_directory=config.root_directory,
            application_name=config.application_name,
            stage=config.stage,
            binary_paths=dict(config.binary_paths),
        )
        processor = CommandProcessor(server, deployment, cli_name=config.cli_name)
        executor = Executor(transport, server, deployment, processor, reporter=reporter)
        binaries = BinaryResolver(
            executor,
            server,
            deployment,
            reporter=reporter,
            runtime_binary=config.runtime_binary,
            cli_name=config.cli_name,
        )
        folders = FolderOps(executor, deployment)

        return cls(
            config=config,
            transport=transport,
            server=server,
            deployment=deployment,
            reporter=reporter,
            executor=executor,
            binaries=binaries,
            folders=folders,
        )

    def close(self) -> None:
        """Release the transport if it holds resources."""
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()
