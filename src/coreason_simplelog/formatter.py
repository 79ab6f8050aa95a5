# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

from typing import Dict, List, Optional

from colorama import Fore, Style

from coreason_simplelog.levels import Level
from coreason_simplelog.schemas import LogRecord, LoggerConfig

RESET = Style.RESET_ALL

# TRACE keeps the terminal's default color and gets no escape at all.
COLORS: Dict[Level, str] = {
    Level.ERROR: Fore.RED,
    Level.WARN: Fore.YELLOW,
    Level.INFO: Fore.GREEN,
    Level.DEBUG: Fore.CYAN,
}


def colorize_label(level: Level) -> str:
    """Wraps the level label in its ANSI color, resetting right after the label."""
    start = COLORS.get(level)
    if start is None:
        return level.label
    return f"{start}{level.label}{RESET}"


def format_record(
    record: LogRecord,
    config: LoggerConfig,
    timestamp: Optional[str] = None,
    colorize: bool = False,
) -> str:
    """
    Renders one record as a single line, without the trailing newline.

    Layout: ``[<timestamp>] <LEVEL> [<thread>] [<target>] <message>``.
    Optional parts that are disabled or missing are dropped together with
    their separator. The message is written verbatim.

    ``colorize`` is the already-resolved decision (colors enabled and the
    destination is eligible); only the level label is ever colored.
    """
    parts: List[str] = []

    if config.timestamps and timestamp:
        parts.append(timestamp)

    parts.append(colorize_label(record.level) if colorize else record.level.label)

    if config.threads and record.thread_name:
        parts.append(f"[{record.thread_name}]")

    if record.target:
        parts.append(f"[{record.target}]")

    parts.append(record.message)
    return " ".join(parts)
