"""Tests for the console reporter."""

import io

import pytest

from launchpad.services.reporter import ConsoleReporter


@pytest.fixture
def streams() -> tuple[io.StringIO, io.StringIO]:
    return io.StringIO(), io.StringIO()


def make_reporter(streams, **kwargs) -> ConsoleReporter:
    out, err = streams
    return ConsoleReporter(stream=out, error_stream=err, use_colors=False, **kwargs)


def test_option_lookup(streams) -> None:
    reporter = make_reporter(streams, options={"pretend": True})

    assert reporter.option("pretend") is True
    assert reporter.option("verbose") is None


def test_messages_go_to_streams(streams) -> None:
    reporter = make_reporter(streams)

    reporter.comment("Deployed")
    reporter.line("ls -la")
    reporter.error("Failed")

    out, err = streams
    assert out.getvalue() == "Deployed\nls -la\n"
    assert err.getvalue() == "Failed\n"


def test_colors(streams) -> None:
    out, _ = streams
    reporter = ConsoleReporter(stream=out, use_colors=True)

    reporter.comment("ok")

    assert out.getvalue().startswith("\033[")


def test_ask_reads_input(streams, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: "  /usr/bin/php \n")
    reporter = make_reporter(streams)

    assert reporter.ask("Where is php?") == "/usr/bin/php"


def test_ask_blank_answer_is_none(streams, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: "")
    reporter = make_reporter(streams)

    assert reporter.ask("Where is php?") is None


def test_ask_non_interactive(streams, monkeypatch: pytest.MonkeyPatch) -> None:
    """Non-interactive reporters never block on input."""

    def fail(prompt: str) -> str:
        raise AssertionError("input() should not be called")

    monkeypatch.setattr("builtins.input", fail)
    reporter = make_reporter(streams, interactive=False)

    assert reporter.ask("Where is php?") is None


def test_ask_closed_stdin_is_none(streams, monkeypatch: pytest.MonkeyPatch) -> None:
    """A closed stdin counts as no answer."""

    def closed(prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    reporter = make_reporter(streams)

    assert reporter.ask("Where is php?") is None
