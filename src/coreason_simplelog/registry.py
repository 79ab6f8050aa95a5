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
from typing import Optional

from coreason_simplelog.exceptions import AlreadyInitialized
from coreason_simplelog.levels import LevelFilter
from coreason_simplelog.logger import SimpleLogger
from coreason_simplelog.utils.logger import logger


class SinkRegistry:
    """
    Process-wide slot for the active console sink.

    A sink is registered at most once per process and is never torn down.
    """

    _instance: Optional[SimpleLogger] = None
    _handler_id: Optional[int] = None
    _lock = threading.Lock()

    @classmethod
    def register(cls, sink: SimpleLogger) -> None:
        """
        Installs ``sink`` as the only loguru handler.

        Raises AlreadyInitialized if a sink is already active; the active one is left untouched.
        """
        with cls._lock:
            if cls._instance is not None:
                raise AlreadyInitialized()

            level = sink.max_level()
            # The console sink replaces loguru's default stderr handler.
            logger.remove()
            cls._handler_id = logger.add(
                sink.write,
                level=level.to_levelno(),
                filter=sink.accepts,
                format="{message}",
                colorize=False,
                # loguru reports sink errors on stderr instead of raising into the caller
                catch=True,
            )
            cls._instance = sink

        logger.debug(f"Registered console sink with max level {level.label}: {sink.config.summary()}")

    @classmethod
    def get_instance(cls) -> SimpleLogger:
        if cls._instance is None:
            raise RuntimeError("No console sink registered. Call init() first.")
        return cls._instance

    @classmethod
    def get_active(cls) -> Optional[SimpleLogger]:
        """Returns the registered sink, or None before init()."""
        return cls._instance

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def max_level(cls) -> LevelFilter:
        """Threshold floor of the active sink; OFF when nothing is registered."""
        if cls._instance is None:
            return LevelFilter.OFF
        return cls._instance.max_level()


def register(sink: SimpleLogger) -> None:
    SinkRegistry.register(sink)


def get_active() -> Optional[SimpleLogger]:
    return SinkRegistry.get_active()
