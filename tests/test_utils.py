# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

import pytest
from loguru import logger as loguru_logger

from coreason_simplelog.builder import LoggerBuilder
from coreason_simplelog.utils.logger import logger


def test_logger_is_loguru() -> None:
    assert logger is loguru_logger


def test_library_diagnostics_are_silent_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    """Messages logged from inside the package never reach the console sink unless enabled."""
    LoggerBuilder().with_timestamps(False).init()
    assert capsys.readouterr().out == ""


def test_library_diagnostics_can_be_enabled(capsys: pytest.CaptureFixture[str]) -> None:
    logger.enable("coreason_simplelog")
    try:
        LoggerBuilder().with_timestamps(False).with_colors(False).init()
    finally:
        logger.disable("coreason_simplelog")

    assert capsys.readouterr().out.startswith("DEBUG [coreason_simplelog.registry] Registered console sink")
