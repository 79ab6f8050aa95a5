# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

import inspect
import logging
from typing import Union

from coreason_simplelog.utils.logger import logger


class InterceptHandler(logging.Handler):
    """
    Routes standard library ``logging`` records into loguru.

    The stdlib logger name becomes the record target, so per-module
    thresholds apply to third-party loggers too.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Union[str, int] = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Attribute the record to the original caller, not to this module or logging internals.
        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.bind(target=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def install_stdlib_bridge(level: Union[int, str] = logging.NOTSET) -> InterceptHandler:
    """
    Replaces the root logger's handlers with an InterceptHandler.
    """
    handler = InterceptHandler()
    logging.basicConfig(handlers=[handler], level=level, force=True)
    return handler
