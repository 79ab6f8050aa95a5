# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

import traceback
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from coreason_simplelog.interfaces import LogBackend
from coreason_simplelog.levels import Level, LevelFilter, to_level_filter


class OutputStream(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


class TimezoneMode(str, Enum):
    UTC = "utc"
    LOCAL = "local"
    OFFSET = "offset"


class ColorPolicy(str, Enum):
    """
    Decides which stream must be a terminal for colors to be written.

    ALWAYS_CHECK_STDOUT is the legacy behaviour: stdout is checked even when
    writing to stderr.
    """

    ALWAYS_CHECK_STDOUT = "always_check_stdout"
    CHECK_OUTPUT_STREAM = "check_output_stream"


class LogRecord(BaseModel):
    """
    A single record handed to the sink. Lives for one emit call.
    """

    model_config = ConfigDict(frozen=True)

    level: Level
    target: str = ""
    message: str = ""
    timestamp: Optional[datetime] = None
    thread_name: Optional[str] = None

    @classmethod
    def from_loguru(cls, record: Mapping[str, Any]) -> "LogRecord":
        """
        Creates a LogRecord from a loguru record dict.

        The target is taken from a bound ``target`` extra when present,
        otherwise from the emitting module name.
        An attached exception is appended to the message as a formatted traceback.
        """
        thread = record.get("thread")
        message = record["message"]
        exception = record.get("exception")
        if exception is not None and exception.type is not None:
            trace = "".join(traceback.format_exception(exception.type, exception.value, exception.traceback))
            message = message + "\n" + trace.rstrip("\n")
        return cls(
            level=Level.from_levelno(record["level"].no),
            target=cls.target_of(record),
            message=message,
            timestamp=record.get("time"),
            thread_name=getattr(thread, "name", None),
        )

    @staticmethod
    def target_of(record: Mapping[str, Any]) -> str:
        extra = record.get("extra") or {}
        target = extra.get("target")
        if target is None:
            target = record.get("name") or ""
        return str(target)


class LoggerConfig(BaseModel):
    """
    Frozen settings consumed by the filter, the formatter and the dispatcher.

    Build it through LoggerBuilder; it is never mutated afterwards and is
    shared read-only by every calling thread.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    level: LevelFilter = LevelFilter.TRACE
    module_levels: Tuple[Tuple[str, LevelFilter], ...] = ()
    colors: bool = True
    timestamps: bool = True
    timestamp_format: Optional[str] = None
    timezone: TimezoneMode = TimezoneMode.UTC
    utc_offset: Optional[timedelta] = None
    threads: bool = False
    output_stream: OutputStream = OutputStream.STDOUT
    color_policy: ColorPolicy = ColorPolicy.ALWAYS_CHECK_STDOUT
    backend: Optional[LogBackend] = None

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> LevelFilter:
        return to_level_filter(value)

    @field_validator("module_levels", mode="before")
    @classmethod
    def _coerce_module_levels(cls, value: Any) -> Tuple[Tuple[str, LevelFilter], ...]:
        if isinstance(value, Mapping):
            value = value.items()
        return tuple((str(prefix), to_level_filter(level)) for prefix, level in value)

    @model_validator(mode="after")
    def _check_offset(self) -> "LoggerConfig":
        if self.timezone is TimezoneMode.OFFSET and self.utc_offset is None:
            raise ValueError("timezone 'offset' requires utc_offset to be set")
        return self

    def summary(self) -> Dict[str, Any]:
        """Returns the settings as plain values, without the backend object."""
        return self.model_dump(mode="json", exclude={"backend"})
