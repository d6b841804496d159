"""Concrete server and deployment contexts."""

import posixpath
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ServerState:
    """Per-server values and conventions for one run.

    Values live for the lifetime of the instance: binary paths resolved
    during a run are stored here under ``paths.<binary>``.
    """

    separator: str = "/"
    line_endings: str = "\n"
    values: dict[str, Any] = field(default_factory=dict)

    def get_value(self, key: str) -> Any:
        return self.values.get(key)

    def set_value(self, key: str, value: Any) -> None:
        self.values[key] = value

    def get_separator(self) -> str:
        return self.separator

    def get_line_endings(self) -> str:
        return self.line_endings


@dataclass
class Deployment:
    """Layout of the application on the remote host."""

    root_directory: str = "/home/www"
    application_name: str = "application"
    stage: str | None = None
    binary_paths: dict[str, str] = field(default_factory=dict)

    @property
    def home_folder(self) -> str:
        """Folder holding the application, per stage when one is set."""
        home = posixpath.join(self.root_directory, self.application_name)
        if self.stage:
            home = posixpath.join(home, self.stage)
        return home

    def get_folder(self, folder: str | None = None) -> str:
        """Resolve a folder name to an absolute path.

        Absolute paths are returned unchanged, relative ones are
        resolved from the home folder.
        """
        if not folder:
            return self.home_folder
        if posixpath.isabs(folder):
            return folder
        return posixpath.join(self.home_folder, folder)

    def get_stage(self) -> str | None:
        return self.stage

    def get_path(self, binary: str) -> str | None:
        return self.binary_paths.get(binary)
