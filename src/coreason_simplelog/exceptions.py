# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog


class SimpleLogError(Exception):
    """Base class for errors raised by coreason-simplelog."""


class InvalidLevel(SimpleLogError, ValueError):
    """
    Raised when a severity name cannot be parsed into a level.
    """

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Invalid log level: {name!r}")


class AlreadyInitialized(SimpleLogError, RuntimeError):
    """
    Raised when a second sink is registered in the same process.

    The first registered sink stays active.
    """

    def __init__(self) -> None:
        super().__init__("A console sink has already been registered for this process.")
