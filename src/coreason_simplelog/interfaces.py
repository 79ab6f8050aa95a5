# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogBackend(Protocol):
    """
    Protocol for a custom destination of formatted lines.

    When configured, it replaces the stdout/stderr write.
    """

    def log(self, message: str) -> None:
        """
        Receives one formatted line, without the trailing newline.
        """
        ...
