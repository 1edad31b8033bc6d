"""Timestamps for new entities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current UTC time truncated to whole milliseconds.

    Timestamps are stored as epoch milliseconds, so an entity stamped with
    this value reads back from storage unchanged.
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)
