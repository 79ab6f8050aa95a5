# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

import threading
from typing import IO, Any

import colorama

from coreason_simplelog.utils.logger import logger

_lock = threading.Lock()
_prepared = False


def is_terminal(stream: IO[Any]) -> bool:
    """True when ``stream`` is attached to an interactive terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        # Closed or detached stream
        return False


def prepare_terminal() -> None:
    """
    Enables ANSI escape processing on the host console.

    Needed once on Windows consoles; a no-op on other platforms. Safe to call repeatedly.
    """
    global _prepared
    with _lock:
        if _prepared:
            return
        colorama.just_fix_windows_console()
        _prepared = True
    logger.debug("Console prepared for ANSI colors")
