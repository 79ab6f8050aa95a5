# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

from enum import IntEnum
from typing import Dict, Union

from coreason_simplelog.exceptions import InvalidLevel


class Level(IntEnum):
    """
    Severity of a single record.

    Ordered from most to least severe: ERROR < WARN < INFO < DEBUG < TRACE.
    A level is enabled at a threshold when it compares less than or equal to it.
    """

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    @classmethod
    def from_str(cls, name: str) -> "Level":
        """Parses a level name, case-insensitively. 'warning' is accepted for WARN."""
        value = _parse(name)
        if value == 0:
            raise InvalidLevel(name)
        return cls(value)

    @classmethod
    def from_levelno(cls, levelno: int) -> "Level":
        """
        Maps a loguru / stdlib numeric level onto the nearest level at or below it.

        TRACE=5, DEBUG=10, INFO=20 (and SUCCESS=25), WARNING=30, ERROR=40 and above.
        """
        if levelno >= 40:
            return cls.ERROR
        if levelno >= 30:
            return cls.WARN
        if levelno >= 20:
            return cls.INFO
        if levelno >= 10:
            return cls.DEBUG
        return cls.TRACE

    def to_level_filter(self) -> "LevelFilter":
        return LevelFilter(self.value)


class LevelFilter(IntEnum):
    """
    Threshold for enabling records: one of the levels, or OFF to disable everything.
    """

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    @classmethod
    def from_str(cls, name: str) -> "LevelFilter":
        return cls(_parse(name))

    def to_levelno(self) -> int:
        """Returns the loguru minimum numeric level matching this threshold."""
        return _LEVELNOS[self.value]


LevelLike = Union[Level, LevelFilter, str]

_LABELS: Dict[int, str] = {
    0: "OFF",
    1: "ERROR",
    2: "WARN",
    3: "INFO",
    4: "DEBUG",
    5: "TRACE",
}

_NAMES: Dict[str, int] = {
    "off": 0,
    "error": 1,
    "warn": 2,
    "warning": 2,
    "info": 3,
    "debug": 4,
    "trace": 5,
}

# OFF sits above CRITICAL (50) so loguru drops everything before the sink filter runs.
_LEVELNOS: Dict[int, int] = {
    0: 100,
    1: 40,
    2: 30,
    3: 20,
    4: 10,
    5: 5,
}


def _parse(name: str) -> int:
    if not isinstance(name, str):
        raise InvalidLevel(name)
    try:
        return _NAMES[name.strip().lower()]
    except KeyError as e:
        raise InvalidLevel(name) from e


def compare(a: Union[Level, LevelFilter], b: Union[Level, LevelFilter]) -> int:
    """
    Three-way comparison of two levels: -1 if a is more severe than b, 0 if equal, 1 otherwise.
    """
    return (a > b) - (a < b)


def to_label(level: Union[Level, LevelFilter]) -> str:
    return level.label


def to_level_filter(level: LevelLike) -> LevelFilter:
    """Coerces a level, threshold or level name into a LevelFilter."""
    if isinstance(level, str):
        return LevelFilter.from_str(level)
    try:
        return LevelFilter(int(level))
    except (TypeError, ValueError) as e:
        raise InvalidLevel(level) from e
