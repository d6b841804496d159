"""Remote command execution core for deployments."""

__version__ = "0.1.0"
