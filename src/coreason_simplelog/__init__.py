# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

"""
coreason-simplelog
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .bridge import InterceptHandler, install_stdlib_bridge
from .builder import LoggerBuilder, init, init_with_env, init_with_level
from .exceptions import AlreadyInitialized, InvalidLevel, SimpleLogError
from .interfaces import LogBackend
from .levels import Level, LevelFilter
from .logger import SimpleLogger
from .registry import SinkRegistry
from .schemas import ColorPolicy, LogRecord, LoggerConfig, OutputStream, TimezoneMode
from .terminal import prepare_terminal

__all__ = [
    "AlreadyInitialized",
    "ColorPolicy",
    "InterceptHandler",
    "InvalidLevel",
    "Level",
    "LevelFilter",
    "LogBackend",
    "LogRecord",
    "LoggerBuilder",
    "LoggerConfig",
    "OutputStream",
    "SimpleLogError",
    "SimpleLogger",
    "SinkRegistry",
    "TimezoneMode",
    "init",
    "init_with_env",
    "init_with_level",
    "install_stdlib_bridge",
    "prepare_terminal",
]
