"""Directory and file primitives built on executor calls."""

import logging
import posixpath

from launchpad.models import Command
from launchpad.protocols import DeploymentContext
from launchpad.services.executor import Executor, Output
from launchpad.utils.shell import quote_path

logger = logging.getLogger(__name__)


class FolderOps:
    """Create, move, link and inspect folders on the remote host."""

    def __init__(self, executor: Executor, deployment: DeploymentContext) -> None:
        self.executor = executor
        self.deployment = deployment

    def file_exists(self, path: str) -> bool:
        """Check if a file or folder exists.

        The check runs raw so the test expression is never rewritten.
        """
        output = self.executor.run_raw(f'[ -e {quote_path(path)} ] && echo "true"')
        return str(output).strip() == "true"

    def create_folder(self, folder: str | None = None, recursive: bool = False) -> Output:
        """Create a folder in the application's folder."""
        flags = ("-p",) if recursive else ()
        return self.executor.run(
            Command.of("mkdir", *flags, self.deployment.get_folder(folder))
        )

    def remove_folder(self, folder: str | None = None) -> Output:
        """Remove a folder in the application's folder."""
        return self.executor.run(
            Command.of("rm", "-rf", self.deployment.get_folder(folder))
        )

    def move(self, origin: str, destination: str) -> Output:
        """Move a file or folder, creating the destination's parent if needed.

        Paths are used exactly as given, the parent check and the move
        act on the same location.
        """
        parent = posixpath.dirname(destination)
        if parent and not self.file_exists(parent):
            self.executor.run(Command.of("mkdir", "-p", parent))

        return self.executor.run(Command.of("mv", origin, destination))

    def symlink(self, target: str, link_path: str) -> Output | bool:
        """Point link_path at target.

        When target is missing but link_path exists, link_path is first
        moved to target so an existing real folder becomes the canonical one.

        Returns:
            The output of the link command, False if neither path exists
        """
        if not self.file_exists(target):
            if not self.file_exists(link_path):
                logger.warning(
                    "Cannot symlink %s to %s: neither path exists", link_path, target
                )
                return False

            self.move(link_path, target)

        if self.file_exists(link_path):
            self.executor.run(Command.of("rm", "-rf", link_path))

        return self.executor.run(Command.of("ln", "-s", target, link_path))

    def list_contents(self, directory: str) -> list[str]:
        """Get the entries of a directory.

        In pretend mode the listing is only recorded, so nothing is returned.
        """
        command = Command.of("ls", directory)
        if self.executor.mode().simulate:
            self.executor.run(command)
            return []

        return list(self.executor.run(command, as_list=True))
