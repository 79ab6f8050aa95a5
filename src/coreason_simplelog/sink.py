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
from typing import IO, Any

from coreason_simplelog.schemas import ColorPolicy, LoggerConfig, OutputStream
from coreason_simplelog.terminal import is_terminal


def select_stream(config: LoggerConfig) -> IO[Any]:
    """
    Returns the configured destination stream.

    Looked up on every call so redirected sys.stdout / sys.stderr are honoured.
    """
    if config.output_stream is OutputStream.STDERR:
        return sys.stderr
    return sys.stdout


def color_eligible(config: LoggerConfig) -> bool:
    """
    Decides whether the destination may receive ANSI colors.

    CHECK_OUTPUT_STREAM checks the stream actually written to.
    ALWAYS_CHECK_STDOUT checks stdout regardless of the destination.
    """
    if config.color_policy is ColorPolicy.CHECK_OUTPUT_STREAM:
        return is_terminal(select_stream(config))
    return is_terminal(sys.stdout)


def should_colorize(config: LoggerConfig) -> bool:
    return config.colors and color_eligible(config)


def emit(line: str, config: LoggerConfig) -> None:
    """
    Writes one formatted line to its destination.

    Exactly one write per line. Failures are dropped: logging must never
    take the host application down.
    """
    if config.backend is not None:
        try:
            config.backend.log(line)
        except Exception:  # noqa: BLE001 - a broken backend must not reach the caller
            pass
        return

    stream = select_stream(config)
    try:
        stream.write(line + "\n")
        stream.flush()
    except (OSError, ValueError, AttributeError):
        # Broken pipe, closed stream, or no console at all (sys.stdout is None)
        pass
