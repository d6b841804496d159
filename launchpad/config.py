"""Configuration management for launchpad."""

import logging
import os
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

from launchpad.models import SSHHost

logger = logging.getLogger(__name__)

PATH_PREFIX = "LAUNCHPAD_PATH_"
TRUTHY = ("true", "1", "yes", "on")


@dataclass
class Config:
    """Launchpad configuration."""

    ssh_config_path: Path = field(
        default_factory=lambda: Path.home() / ".ssh" / "config"
    )
    # Run modes
    pretend: bool = False
    verbose: bool = False
    interactive: bool = field(default_factory=lambda: sys.stdin.isatty())
    # Deployment layout
    root_directory: str = "/home/www"
    application_name: str = "application"
    stage: str | None = None
    # Application binaries
    cli_name: str = "artisan"
    runtime_binary: str = "php"
    binary_paths: dict[str, str] = field(default_factory=dict)
    # Remote conventions
    separator: str = "/"
    line_endings: str = "\n"

    _hosts: dict[str, SSHHost] = field(default_factory=dict, init=False, repr=False)
    _parsed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        """Apply LAUNCHPAD_* environment variable overrides."""

        def get_env_bool(key: str) -> bool | None:
            if val := os.getenv(key, "").lower():
                return val in TRUTHY
            return None

        val = get_env_bool("LAUNCHPAD_PRETEND")
        if val is not None:
            self.pretend = val

        val = get_env_bool("LAUNCHPAD_VERBOSE")
        if val is not None:
            self.verbose = val

        val = get_env_bool("LAUNCHPAD_INTERACTIVE")
        if val is not None:
            self.interactive = val

        if ssh_config := os.getenv("LAUNCHPAD_SSH_CONFIG"):
            self.ssh_config_path = Path(os.path.expanduser(ssh_config))

        if stage := os.getenv("LAUNCHPAD_STAGE"):
            self.stage = stage

        if root := os.getenv("LAUNCHPAD_ROOT_DIRECTORY"):
            self.root_directory = root

        if name := os.getenv("LAUNCHPAD_APPLICATION_NAME"):
            self.application_name = name

        if cli_name := os.getenv("LAUNCHPAD_CLI_NAME"):
            self.cli_name = cli_name

        if runtime := os.getenv("LAUNCHPAD_RUNTIME_BINARY"):
            self.runtime_binary = runtime

        # LAUNCHPAD_PATH_COMPOSER=/usr/local/bin/composer -> paths["composer"]
        for key, value in os.environ.items():
            if key.startswith(PATH_PREFIX) and value:
                binary = key[len(PATH_PREFIX) :].lower()
                self.binary_paths[binary] = value

        logger.debug(
            "Config initialized: pretend=%s, verbose=%s, stage=%s, root=%s, app=%s",
            self.pretend,
            self.verbose,
            self.stage,
            self.root_directory,
            self.application_name,
        )

    @property
    def options(self) -> dict[str, bool]:
        """Run-mode flags as read by the reporter."""
        return {"pretend": self.pretend, "verbose": self.verbose}

    def _parse_ssh_config(self) -> None:
        """Parse SSH config file and populate hosts."""
        if self._parsed:
            return

        if not self.ssh_config_path.exists():
            logger.warning("SSH config not found: %s", self.ssh_config_path)
            self._parsed = True
            return

        try:
            content = self.ssh_config_path.read_text()
            logger.debug("Reading SSH config from %s", self.ssh_config_path)
        except OSError as e:
            # Treat unreadable config as empty
            logger.warning("Cannot read SSH config %s: %s", self.ssh_config_path, e)
            self._parsed = True
            return

        current_host: str | None = None
        current_data: dict[str, str] = {}
        global_defaults: dict[str, str] = {}

        for line in content.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            host_match = re.match(r"^Host\s+(\S+)", line, re.IGNORECASE)
            if host_match:
                self._save_host(current_host, current_data)
                current_host = host_match.group(1)
                # Start with global defaults for each host (except Host *)
                current_data = global_defaults.copy() if current_host != "*" else {}
                continue

            kv_match = re.match(r"^(\w+)\s+(.+)$", line)
            if kv_match and current_host:
                key = kv_match.group(1).lower()
                value = kv_match.group(2)
                if key == "identityfile":
                    value = os.path.expanduser(value)
                current_data[key] = value
                if current_host == "*":
                    global_defaults[key] = value

        self._save_host(current_host, current_data)
        self._parsed = True
        logger.debug("Parsed %d SSH host(s) from config", len(self._hosts))

    def _save_host(self, name: str | None, data: dict[str, str]) -> None:
        if not name or name == "*" or not data.get("hostname"):
            return
        try:
            port = int(data.get("port", "22"))
        except ValueError:
            port = 22
        self._hosts[name] = SSHHost(
            name=name,
            hostname=data["hostname"],
            user=data.get("user", "root"),
            port=port,
            identity_file=data.get("identityfile"),
        )

    def get_hosts(self) -> dict[str, SSHHost]:
        """Get all SSH hosts from the config file."""
        self._parse_ssh_config()
        return dict(self._hosts)

    def get_host(self, name: str) -> SSHHost | None:
        """Get a specific host by name."""
        return self.get_hosts().get(name)

    @property
    def known_hosts_path(self) -> str | None:
        """Path to known_hosts file, None when LAUNCHPAD_KNOWN_HOSTS=none.

        Raises:
            FileNotFoundError: If the known_hosts file doesn't exist
        """
        value = os.getenv("LAUNCHPAD_KNOWN_HOSTS", "").strip()

        if value.lower() == "none":
            logger.critical("SSH host key verification DISABLED (LAUNCHPAD_KNOWN_HOSTS=none)")
            return None

        path = Path(os.path.expanduser(value)) if value else Path.home() / ".ssh" / "known_hosts"
        if not path.exists():
            raise FileNotFoundError(
                f"known_hosts not found: {path}. Add host keys with "
                f"'ssh-keyscan <hostname> >> {path}' or set LAUNCHPAD_KNOWN_HOSTS=none"
            )
        return str(path)

    @property
    def strict_host_key_checking(self) -> bool:
        """Whether to reject unknown host keys (LAUNCHPAD_STRICT_HOST_KEY_CHECKING)."""
        return os.getenv("LAUNCHPAD_STRICT_HOST_KEY_CHECKING", "true").lower() != "false"
