# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

from typing import Union

from coreason_simplelog.levels import Level, LevelFilter
from coreason_simplelog.schemas import LoggerConfig

SEPARATOR = "."


def matches(prefix: str, target: str) -> bool:
    """
    True when ``prefix`` names ``target`` itself or one of its ancestors.

    Matching respects the hierarchy: 'app' matches 'app' and 'app.db' but not 'application'.
    An empty prefix matches every target.
    """
    if not prefix:
        return True
    return target == prefix or target.startswith(prefix + SEPARATOR)


def resolve_threshold(target: str, config: LoggerConfig) -> LevelFilter:
    """
    Returns the threshold that applies to ``target``.

    The longest matching module prefix wins. Between equally long prefixes,
    the entry added last wins. Without a match, the global level applies.
    """
    best_length = -1
    threshold = config.level
    for prefix, level in config.module_levels:
        # >= so that a later duplicate overrides an earlier one
        if len(prefix) >= best_length and matches(prefix, target):
            best_length = len(prefix)
            threshold = level
    return threshold


def is_enabled(target: str, level: Union[Level, LevelFilter], config: LoggerConfig) -> bool:
    return level != LevelFilter.OFF and level <= resolve_threshold(target, config)


def max_level(config: LoggerConfig) -> LevelFilter:
    """
    The most verbose threshold across the global and per-module levels.

    Anything more verbose than this can be dropped by the facade without asking the sink.
    """
    return max([config.level, *(level for _, level in config.module_levels)])
