"""Tests for command normalization."""

import pytest

from launchpad.models import Command
from launchpad.services.context import Deployment, ServerState
from launchpad.services.processor import CommandProcessor


def test_wraps_single_command_into_batch(processor: CommandProcessor) -> None:
    """A lone command becomes a one-element batch."""
    assert processor.process("ls -la") == ["ls -la"]


def test_keeps_batch_order(processor: CommandProcessor) -> None:
    """Commands keep their order."""
    batch = processor.process(["cd /var/www", "git pull", "ls"])

    assert batch == ["cd /var/www", "git pull", "ls"]


def test_renders_command_objects(processor: CommandProcessor) -> None:
    """Command objects are rendered with quoted arguments."""
    batch = processor.process([Command.of("mkdir", "-p", "/srv/my app"), "ls"])

    assert batch == ["mkdir -p '/srv/my app'", "ls"]


def test_empty_batch_raises(processor: CommandProcessor) -> None:
    """An empty batch is a programming error."""
    with pytest.raises(ValueError, match="empty"):
        processor.process([])


def test_rewrites_local_separators() -> None:
    """Local separators are rewritten when the remote uses another one."""
    processor = CommandProcessor(
        ServerState(separator="/"), Deployment(), local_separator="\\"
    )

    assert processor.process("cd releases\\5") == ["cd releases/5"]


def test_leaves_separators_when_conventions_match(processor: CommandProcessor) -> None:
    """Nothing is rewritten when both sides agree."""
    assert processor.process("cd releases\\5") == ["cd releases\\5"]


class TestStageFlag:
    """Environment flag on application CLI calls."""

    @pytest.fixture
    def staged(self, server: ServerState) -> CommandProcessor:
        deployment = Deployment(stage="staging")
        return CommandProcessor(server, deployment, cli_name="artisan", local_separator="/")

    def test_appends_flag_to_cli_commands(self, staged: CommandProcessor) -> None:
        """CLI invocations get the stage flag."""
        assert staged.process("php artisan migrate") == [
            "php artisan migrate --env=staging"
        ]

    def test_skips_other_commands(self, staged: CommandProcessor) -> None:
        """Commands not mentioning the CLI are untouched."""
        assert staged.process(["ls", "php artisan cache:clear"]) == [
            "ls",
            "php artisan cache:clear --env=staging",
        ]

    def test_no_flag_without_stage(self, processor: CommandProcessor) -> None:
        """Without a stage no flag is added."""
        assert processor.process("php artisan migrate") == ["php artisan migrate"]

    def test_custom_cli_name(self, server: ServerState) -> None:
        """The CLI program name is configurable."""
        processor = CommandProcessor(
            server, Deployment(stage="prod"), cli_name="manage.py", local_separator="/"
        )

        assert processor.process(["python manage.py migrate", "php artisan up"]) == [
            "python manage.py migrate --env=prod",
            "php artisan up",
        ]

    def test_stage_is_quoted(self, server: ServerState) -> None:
        """Stage names cannot inject shell syntax."""
        processor = CommandProcessor(
            server, Deployment(stage="x; rm -rf /"), local_separator="/"
        )

        assert processor.process("php artisan up") == [
            "php artisan up --env='x; rm -rf /'"
        ]
