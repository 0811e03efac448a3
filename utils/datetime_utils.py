"""Utilities for epoch-millisecond timestamps and UTC datetimes."""

from __future__ import annotations

import time
from datetime import date, datetime, timezone
from typing import Optional

UTC = timezone.utc


def now_ms() -> int:
    """Current wall-clock time as integer epoch milliseconds."""

    return time.time_ns() // 1_000_000


def datetime_to_ms(dt: datetime) -> int:
    """Convert a datetime to epoch milliseconds. Naive values are read as local time."""

    return int(round(dt.timestamp() * 1000))


def ms_to_datetime(value: Optional[int], *, tz: Optional[timezone] = None) -> Optional[datetime]:
    """Convert epoch milliseconds to an aware datetime (local zone unless ``tz`` is given)."""

    if value is None:
        return None
    dt = datetime.fromtimestamp(value / 1000, tz=UTC)
    if tz is not None:
        return dt.astimezone(tz)
    return dt.astimezone()


def local_midnight_ms(d: date) -> int:
    return datetime_to_ms(datetime(d.year, d.month, d.day))


__all__ = [
    "UTC",
    "datetime_to_ms",
    "local_midnight_ms",
    "ms_to_datetime",
    "now_ms",
]
