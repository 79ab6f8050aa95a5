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
from datetime import datetime, timezone
from typing import Optional

from coreason_simplelog.schemas import LoggerConfig, TimezoneMode


def now() -> datetime:
    return datetime.now(timezone.utc)


def convert(when: datetime, config: LoggerConfig) -> datetime:
    """
    Moves ``when`` into the configured timezone. Naive datetimes are taken as local time.
    """
    if config.timezone is TimezoneMode.LOCAL:
        return when.astimezone()
    if config.timezone is TimezoneMode.OFFSET and config.utc_offset is not None:
        return when.astimezone(timezone(config.utc_offset))
    return when.astimezone(timezone.utc)


def rfc3339(when: datetime) -> str:
    """
    Renders an aware datetime as RFC 3339 with microseconds; UTC is written as 'Z'.
    """
    if when.utcoffset() == timezone.utc.utcoffset(None):
        return when.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
    return when.isoformat(timespec="microseconds")


def resolve_timestamp(config: LoggerConfig, when: Optional[datetime] = None) -> Optional[str]:
    """
    Returns the timestamp text for a record, or None when timestamps are disabled.

    Uses the record's own time when given, otherwise the current time.
    """
    if not config.timestamps:
        return None
    local = convert(when if when is not None else now(), config)
    if config.timestamp_format:
        return local.strftime(config.timestamp_format)
    return rfc3339(local)


def current_thread_name() -> Optional[str]:
    """Name of the calling thread, queried fresh on every call."""
    return threading.current_thread().name or None
