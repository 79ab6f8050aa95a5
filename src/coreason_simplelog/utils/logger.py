# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

from typing import Any

from loguru import logger as _logger

__all__ = ["logger"]

# Library diagnostics stay silent unless the application opts in with
# logger.enable("coreason_simplelog"). The console sink itself is installed
# by coreason_simplelog.registry, never at import time.
_logger.disable("coreason_simplelog")

logger: Any = _logger
