# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

import os
from datetime import timedelta
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from coreason_simplelog.interfaces import LogBackend
from coreason_simplelog.levels import LevelLike, to_level_filter
from coreason_simplelog.logger import SimpleLogger
from coreason_simplelog.registry import SinkRegistry
from coreason_simplelog.schemas import ColorPolicy, LoggerConfig, OutputStream, TimezoneMode
from coreason_simplelog.terminal import prepare_terminal
from coreason_simplelog.utils.logger import logger

DEFAULT_ENV_VAR = "LOG_LEVEL"


class LoggerBuilder(BaseModel):
    """
    Immutable builder for LoggerConfig.

    Every ``with_*`` method returns a new builder and leaves the current one
    unchanged. Call ``build()`` for the frozen config, or ``init()`` to also
    register the console sink.

    Level arguments accept Level, LevelFilter or a level name; unknown names
    raise InvalidLevel here, before anything is registered.
    """

    model_config = ConfigDict(frozen=True)

    settings: LoggerConfig = LoggerConfig()

    def _with(self, **changes: Any) -> "LoggerBuilder":
        return LoggerBuilder(settings=self.settings.model_copy(update=changes))

    def with_level(self, level: LevelLike) -> "LoggerBuilder":
        """Sets the global threshold."""
        return self._with(level=to_level_filter(level))

    def with_module_level(self, prefix: str, level: LevelLike) -> "LoggerBuilder":
        """
        Overrides the threshold for a module and its sub-modules.

        The most specific prefix wins; repeating a prefix overrides the earlier entry.
        """
        entry = (prefix, to_level_filter(level))
        return self._with(module_levels=self.settings.module_levels + (entry,))

    def with_module_levels(self, levels: Mapping[str, LevelLike]) -> "LoggerBuilder":
        builder = self
        for prefix, level in levels.items():
            builder = builder.with_module_level(prefix, level)
        return builder

    def with_colors(self, colors: bool) -> "LoggerBuilder":
        return self._with(colors=colors)

    def with_timestamps(self, timestamps: bool) -> "LoggerBuilder":
        return self._with(timestamps=timestamps)

    def with_timestamp_format(self, fmt: Optional[str]) -> "LoggerBuilder":
        """Uses a strftime format instead of RFC 3339. None restores the default."""
        return self._with(timestamp_format=fmt)

    def with_utc_timezone(self) -> "LoggerBuilder":
        return self._with(timezone=TimezoneMode.UTC, utc_offset=None)

    def with_local_timezone(self) -> "LoggerBuilder":
        return self._with(timezone=TimezoneMode.LOCAL, utc_offset=None)

    def with_utc_offset(self, offset: timedelta) -> "LoggerBuilder":
        """
        Renders timestamps at a fixed offset from UTC. Daylight saving changes are not followed.
        """
        if not timedelta(hours=-24) < offset < timedelta(hours=24):
            raise ValueError(f"UTC offset out of range: {offset}")
        # RFC 3339 offsets carry hours and minutes only
        if offset % timedelta(minutes=1):
            raise ValueError(f"UTC offset must be a whole number of minutes: {offset}")
        return self._with(timezone=TimezoneMode.OFFSET, utc_offset=offset)

    def with_threads(self, threads: bool) -> "LoggerBuilder":
        return self._with(threads=threads)

    def with_output_stream(self, stream: OutputStream) -> "LoggerBuilder":
        return self._with(output_stream=OutputStream(stream))

    def with_color_policy(self, policy: ColorPolicy) -> "LoggerBuilder":
        return self._with(color_policy=ColorPolicy(policy))

    def with_backend(self, backend: Optional[LogBackend]) -> "LoggerBuilder":
        """Sends formatted lines to ``backend`` instead of stdout/stderr."""
        if backend is not None and not isinstance(backend, LogBackend):
            raise TypeError(f"{type(backend).__name__} does not implement log(message)")
        return self._with(backend=backend)

    def env(self, var: str = DEFAULT_ENV_VAR) -> "LoggerBuilder":
        """
        Takes the global threshold from an environment variable.

        An unset or blank variable keeps the current level; an unknown name raises InvalidLevel.
        """
        value = os.environ.get(var, "").strip()
        if not value:
            return self
        logger.debug(f"Using log level {value!r} from ${var}")
        return self.with_level(value)

    def build(self) -> LoggerConfig:
        """Freezes the settings into a validated LoggerConfig."""
        return LoggerConfig.model_validate(dict(self.settings))

    def init(self) -> SimpleLogger:
        """
        Builds the config and registers the console sink for this process.

        Raises AlreadyInitialized if a sink was registered before.
        """
        config = self.build()
        if config.colors:
            prepare_terminal()
        sink = SimpleLogger(config)
        SinkRegistry.register(sink)
        return sink


# --- Shortcuts ---


def init() -> SimpleLogger:
    """Registers the console sink with the default configuration. Nothing is filtered."""
    return LoggerBuilder().init()


def init_with_level(level: LevelLike) -> SimpleLogger:
    """Registers the console sink, dropping records less severe than ``level``."""
    return LoggerBuilder().with_level(level).init()


def init_with_env(var: str = DEFAULT_ENV_VAR) -> SimpleLogger:
    """Registers the console sink with the threshold taken from ``var`` (default LOG_LEVEL)."""
    return LoggerBuilder().env(var).init()
