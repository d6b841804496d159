"""Shared fakes for service tests."""

import shlex
from collections.abc import Callable, Sequence
from typing import Any

import pytest

from launchpad.services.context import Deployment, ServerState
from launchpad.services.executor import Executor
from launchpad.services.processor import CommandProcessor

EXISTS_PREFIX = "[ -e "
EXISTS_SUFFIX = ' ] && echo "true"'


class FakeTransport:
    """Transport that records batches and replays canned output."""

    def __init__(self) -> None:
        self.batches: list[list[str]] = []
        self.outputs: dict[str, list[str]] = {}
        self.displayed: list[str] = []
        self.exit_status = 0
        self.existing: set[str] = set()

    def respond(self, command: str, *chunks: str) -> None:
        """Stream chunks whenever a batch ends with this command."""
        self.outputs[command] = list(chunks)

    def run(self, commands: Sequence[str], on_output: Callable[[str], None]) -> None:
        batch = list(commands)
        self.batches.append(batch)
        last = batch[-1]

        for command in batch:
            if command.startswith("mv "):
                _, origin, destination = shlex.split(command)
                self.existing.discard(origin)
                self.existing.add(destination)

        if last.startswith(EXISTS_PREFIX) and last.endswith(EXISTS_SUFFIX):
            path = shlex.split(last[len(EXISTS_PREFIX) : -len(EXISTS_SUFFIX)])[0]
            on_output("true\n" if path in self.existing else "")
            return

        for chunk in self.outputs.get(last, []):
            on_output(chunk)

    def status(self) -> int:
        return self.exit_status

    def display(self, text: str) -> None:
        self.displayed.append(text)

    @property
    def commands(self) -> list[str]:
        """Every command sent, existence checks excluded."""
        return [
            command
            for batch in self.batches
            for command in batch
            if not command.startswith(EXISTS_PREFIX)
        ]


class FakeReporter:
    """Reporter with fixed options and scripted answers."""

    def __init__(self, **options: Any) -> None:
        self.options = options
        self.answers: list[str | None] = []
        self.prompts: list[str] = []
        self.comments: list[str] = []
        self.errors: list[str] = []
        self.lines: list[str] = []

    def option(self, name: str) -> Any:
        return self.options.get(name)

    def ask(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        return self.answers.pop(0) if self.answers else None

    def comment(self, text: str) -> None:
        self.comments.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)

    def line(self, text: str) -> None:
        self.lines.append(text)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def reporter() -> FakeReporter:
    return FakeReporter()


@pytest.fixture
def server() -> ServerState:
    return ServerState()


@pytest.fixture
def deployment() -> Deployment:
    return Deployment(root_directory="/var/www", application_name="shop")


@pytest.fixture
def processor(server: ServerState, deployment: Deployment) -> CommandProcessor:
    return CommandProcessor(server, deployment, cli_name="artisan", local_separator="/")


@pytest.fixture
def executor(
    transport: FakeTransport,
    server: ServerState,
    deployment: Deployment,
    processor: CommandProcessor,
    reporter: FakeReporter,
) -> Executor:
    return Executor(transport, server, deployment, processor, reporter=reporter)
