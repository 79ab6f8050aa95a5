# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

from typing import Any, Mapping, Union

from coreason_simplelog.clock import current_thread_name, resolve_timestamp
from coreason_simplelog.filtering import is_enabled, max_level
from coreason_simplelog.formatter import format_record
from coreason_simplelog.levels import Level, LevelFilter
from coreason_simplelog.schemas import LogRecord, LoggerConfig
from coreason_simplelog.sink import emit, select_stream, should_colorize


class SimpleLogger:
    """
    Console sink: filters, formats and writes records using a frozen LoggerConfig.

    Holds no mutable state, so one instance is shared by all calling threads
    without locking.
    """

    def __init__(self, config: LoggerConfig):
        self.config = config

    def enabled(self, target: str, level: Union[Level, LevelFilter]) -> bool:
        """Cheap pre-check the facade can call before building a record."""
        return is_enabled(target, level, self.config)

    def max_level(self) -> LevelFilter:
        return max_level(self.config)

    def render(self, record: LogRecord) -> str:
        """
        Formats a record as it would be written, without writing it.
        """
        if self.config.threads and record.thread_name is None:
            record = record.model_copy(update={"thread_name": current_thread_name()})
        timestamp = resolve_timestamp(self.config, record.timestamp)
        return format_record(record, self.config, timestamp, colorize=should_colorize(self.config))

    def log(self, record: LogRecord) -> None:
        if not self.enabled(record.target, record.level):
            return
        emit(self.render(record), self.config)

    def flush(self) -> None:
        if self.config.backend is not None:
            return
        try:
            select_stream(self.config).flush()
        except (OSError, ValueError, AttributeError):
            pass

    # --- loguru sink adapters ---

    def accepts(self, record: Mapping[str, Any]) -> bool:
        """loguru ``filter`` callback."""
        return self.enabled(LogRecord.target_of(record), Level.from_levelno(record["level"].no))

    def write(self, message: Any) -> None:
        """loguru sink callback; ``message.record`` carries the structured record."""
        self.log(LogRecord.from_loguru(message.record))
