"""Millisecond Unix timestamps."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import Optional

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_millis() -> int:
    """Return the current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def timestamp_to_datetime(ts: int) -> Optional[datetime]:
    """Convert a millisecond timestamp to an aware UTC datetime, or None if out of range."""
    try:
        return _EPOCH + timedelta(milliseconds=ts)
    except OverflowError:
        return None