"""Blocking SSH transport on top of asyncssh.

The transport owns a private event loop and drives every asyncssh call
to completion before returning, so callers see a plain synchronous API.
Output is streamed to the caller's callback chunk by chunk as it is read.
"""

import asyncio
import logging
from collections.abc import Sequence

import asyncssh

from launchpad.models import SSHHost
from launchpad.protocols import OutputCallback
from launchpad.utils.shell import join_commands

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096


class TransportError(Exception):
    """Remote host could not be reached or the session broke."""

    def __init__(self, host_name: str, original_error: Exception):
        """Initialize transport error.

        Args:
            host_name: Name of the SSH host
            original_error: Original exception that caused the failure
        """
        self.host_name = host_name
        self.original_error = original_error
        super().__init__(f"Cannot run commands on {host_name}: {original_error}")


class SSHTransport:
    """Run command batches on one SSH host."""

    def __init__(
        self,
        host: SSHHost,
        known_hosts: str | None = None,
        strict_host_key_checking: bool = True,
    ) -> None:
        self.host = host
        self._known_hosts = known_hosts
        self._strict_host_key = strict_host_key_checking
        self._loop: asyncio.AbstractEventLoop | None = None
        self._conn: asyncssh.SSHClientConnection | None = None
        self._status = 0
        self.last_error = ""

        if self._known_hosts is None:
            logger.warning(
                "SSH host key verification DISABLED for %s - vulnerable to MITM "
                "attacks. Set LAUNCHPAD_KNOWN_HOSTS to a known_hosts file path.",
                host.name,
            )

    def run(self, commands: Sequence[str], on_output: OutputCallback) -> None:
        """Run a batch as one chained shell command, streaming stdout."""
        try:
            self._get_loop().run_until_complete(self._run(list(commands), on_output))
        except (asyncssh.Error, OSError) as e:
            logger.error("Transport failure on %s: %s", self.host.name, e)
            raise TransportError(self.host.name, e) from e

    def __enter__(self) -> "SSHTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        """Open the event loop on first use."""
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        return self._loop

    def status(self) -> int:
        return self._status

    def display(self, text: str) -> None:
        print(f"[{self.host.name}] {text}")

    def close(self) -> None:
        """Close the connection and the event loop."""
        if self._conn is not None:
            logger.info("Closing SSH connection to %s", self.host.name)
            self._conn.close()
            self._get_loop().run_until_complete(self._conn.wait_closed())
            self._conn = None
        if self._loop is not None and not self._loop.is_closed():
            self._loop.close()
        self._loop = None

    async def _connect(self) -> asyncssh.SSHClientConnection:
        """Open the connection on first use."""
        if self._conn is not None:
            return self._conn

        host = self.host
        logger.info(
            "Opening SSH connection to %s (%s@%s:%d)",
            host.name,
            host.user,
            host.hostname,
            host.port,
        )
        client_keys = [host.identity_file] if host.identity_file else None

        try:
            conn = await asyncssh.connect(
                host.hostname,
                port=host.port,
                username=host.user,
                known_hosts=self._known_hosts,
                client_keys=client_keys,
            )
        except asyncssh.HostKeyNotVerifiable as e:
            if self._strict_host_key:
                logger.error(
                    "Host key verification failed for %s: %s. "
                    "Add the host key to %s or set "
                    "LAUNCHPAD_STRICT_HOST_KEY_CHECKING=false",
                    host.name,
                    e,
                    self._known_hosts,
                )
                raise
            logger.warning(
                "Host key not verified for %s (strict mode disabled): %s",
                host.name,
                e,
            )
            conn = await asyncssh.connect(
                host.hostname,
                port=host.port,
                username=host.user,
                known_hosts=None,
                client_keys=client_keys,
            )

        self._conn = conn
        return conn

    async def _run(self, commands: list[str], on_output: OutputCallback) -> None:
        conn = await self._connect()
        script = join_commands(commands)

        async with conn.create_process(script, encoding="utf-8") as proc:

            async def read_stdout() -> None:
                while True:
                    chunk = await proc.stdout.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    on_output(chunk)

            async def read_stderr() -> str:
                return await proc.stderr.read()

            _, error = await asyncio.gather(read_stdout(), read_stderr())
            await proc.wait()

        self.last_error = error or ""
        if self.last_error:
            logger.debug("stderr from %s: %s", self.host.name, self.last_error.rstrip())

        # Killed by a signal leaves no exit status
        exit_status = proc.exit_status
        self._status = exit_status if exit_status is not None else -1
