# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

import sys
from typing import Any

import pytest

from coreason_simplelog import sink
from coreason_simplelog.schemas import ColorPolicy, LoggerConfig, OutputStream


class BrokenStream:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def write(self, data: str) -> int:
        raise self.exc

    def flush(self) -> None:
        raise self.exc

    def isatty(self) -> bool:
        raise ValueError("I/O operation on closed file")


def test_emit_writes_one_line_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    sink.emit("WARN [app] hello", LoggerConfig())
    captured = capsys.readouterr()
    assert captured.out == "WARN [app] hello\n"
    assert captured.err == ""


def test_emit_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    sink.emit("ERROR [app] boom", LoggerConfig(output_stream=OutputStream.STDERR))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "ERROR [app] boom\n"


def test_emit_is_a_single_write(monkeypatch: pytest.MonkeyPatch, fake_pipe: Any) -> None:
    monkeypatch.setattr(sys, "stdout", fake_pipe)
    sink.emit("multi\nline", LoggerConfig())
    assert fake_pipe.writes == ["multi\nline\n"]


@pytest.mark.parametrize("exc", [BrokenPipeError(), OSError("gone"), ValueError("closed")])
def test_write_failures_are_swallowed(monkeypatch: pytest.MonkeyPatch, exc: Exception) -> None:
    monkeypatch.setattr(sys, "stdout", BrokenStream(exc))
    sink.emit("lost line", LoggerConfig())


def test_missing_console_is_tolerated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdout", None)
    sink.emit("nowhere to go", LoggerConfig())


def test_backend_replaces_stream(capsys: pytest.CaptureFixture[str], list_backend: Any) -> None:
    sink.emit("INFO [app] routed", LoggerConfig(backend=list_backend))
    assert list_backend.lines == ["INFO [app] routed"]
    assert capsys.readouterr().out == ""


def test_failing_backend_is_swallowed() -> None:
    class Exploding:
        def log(self, message: str) -> None:
            raise RuntimeError("backend down")

    sink.emit("INFO [app] routed", LoggerConfig(backend=Exploding()))


def test_check_output_stream_policy(monkeypatch: pytest.MonkeyPatch, fake_tty: Any, fake_pipe: Any) -> None:
    """Only the stream actually written to matters."""
    monkeypatch.setattr(sys, "stdout", fake_pipe)
    monkeypatch.setattr(sys, "stderr", fake_tty)

    to_stderr = LoggerConfig(output_stream=OutputStream.STDERR, color_policy=ColorPolicy.CHECK_OUTPUT_STREAM)
    to_stdout = LoggerConfig(output_stream=OutputStream.STDOUT, color_policy=ColorPolicy.CHECK_OUTPUT_STREAM)

    assert sink.color_eligible(to_stderr)
    assert not sink.color_eligible(to_stdout)


def test_legacy_policy_always_checks_stdout(monkeypatch: pytest.MonkeyPatch, fake_tty: Any, fake_pipe: Any) -> None:
    """Writing to a terminal stderr is not enough when stdout is piped, and vice versa."""
    monkeypatch.setattr(sys, "stdout", fake_pipe)
    monkeypatch.setattr(sys, "stderr", fake_tty)
    config = LoggerConfig(output_stream=OutputStream.STDERR, color_policy=ColorPolicy.ALWAYS_CHECK_STDOUT)
    assert not sink.color_eligible(config)

    monkeypatch.setattr(sys, "stdout", fake_tty)
    monkeypatch.setattr(sys, "stderr", fake_pipe)
    assert sink.color_eligible(config)


def test_should_colorize_requires_colors_enabled(monkeypatch: pytest.MonkeyPatch, fake_tty: Any) -> None:
    monkeypatch.setattr(sys, "stdout", fake_tty)
    assert sink.should_colorize(LoggerConfig())
    assert not sink.should_colorize(LoggerConfig(colors=False))


def test_closed_stream_is_not_a_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdout", BrokenStream(ValueError("closed")))
    assert not sink.color_eligible(LoggerConfig())
