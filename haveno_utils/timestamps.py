"""Rendering of millisecond epoch timestamps."""

from __future__ import annotations

import math
from datetime import datetime, timezone

DEFAULT_TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(
    timestamp_ms: int | float,
    fmt: str = DEFAULT_TIMESTAMP_FMT,
    utc: bool = True,
) -> str:
    """Format a millisecond epoch timestamp, in UTC or local time.

    >>> format_timestamp(1_700_000_000_000)
    '2023-11-14 22:13:20'
    """
    if isinstance(timestamp_ms, bool) or not isinstance(timestamp_ms, (int, float)):
        raise ValueError(f"Timestamp must be a number of milliseconds, got {timestamp_ms!r}")
    if not math.isfinite(timestamp_ms):
        raise ValueError(f"Timestamp must be finite, got {timestamp_ms!r}")
    try:
        dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc if utc else None)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"Timestamp out of range: {timestamp_ms!r}") from exc
    return dt.strftime(fmt)
