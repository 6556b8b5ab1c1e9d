"""Time helpers working in the local time zone."""

from __future__ import annotations

from datetime import date, datetime
from datetime import time as clock


def get_timestamp() -> int:
    """Return the current Unix time in seconds."""
    return int(datetime.now().timestamp())


def get_begin_of_today() -> int:
    """Return the Unix time of local midnight today."""
    return int(datetime.combine(date.today(), clock.min).timestamp())


def is_before_today(timestamp: int) -> bool:
    """Tell whether the timestamp falls on a local day before today."""
    return datetime.fromtimestamp(timestamp).date() < date.today()