# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

from typing import Generator, List

import pytest
from loguru import logger

from coreason_simplelog.levels import Level
from coreason_simplelog.registry import SinkRegistry
from coreason_simplelog.schemas import LogRecord, LoggerConfig

# --- Mocks ---


class ListBackend:
    """Collects formatted lines in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def log(self, message: str) -> None:
        self.lines.append(message)


class FakeTTY:
    """Stream double that claims to be an interactive terminal."""

    def __init__(self, tty: bool = True) -> None:
        self.tty = tty
        self.writes: List[str] = []

    def isatty(self) -> bool:
        return self.tty

    def write(self, data: str) -> int:
        self.writes.append(data)
        return len(data)

    def flush(self) -> None:
        pass


# --- Fixtures ---


@pytest.fixture(autouse=True)
def reset_registry() -> Generator[None, None, None]:
    """The registry is init-once per process; tests get a fresh slot and no loguru handlers."""
    SinkRegistry._instance = None
    SinkRegistry._handler_id = None
    yield
    SinkRegistry._instance = None
    SinkRegistry._handler_id = None
    logger.remove()


@pytest.fixture
def plain_config() -> LoggerConfig:
    """Timestamps on, no colors, no threads."""
    return LoggerConfig(colors=False)


@pytest.fixture
def warn_record() -> LogRecord:
    return LogRecord(level=Level.WARN, target="logging_example", message="This is an example message.")


@pytest.fixture
def list_backend() -> ListBackend:
    return ListBackend()


@pytest.fixture
def fake_tty() -> FakeTTY:
    return FakeTTY(tty=True)


@pytest.fixture
def fake_pipe() -> FakeTTY:
    return FakeTTY(tty=False)
