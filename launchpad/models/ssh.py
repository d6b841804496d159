"""SSH-related data models."""

from dataclasses import dataclass


@dataclass
class SSHHost:
    """SSH host configuration."""

    name: str
    hostname: str
    user: str = "root"
    port: int = 22
    identity_file: str | None = None
