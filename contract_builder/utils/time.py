"""
Time helpers for deployment sessions.

Session timestamps are wall-clock UTC; they are informational only and never
drive a transition.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(ts: Optional[datetime]) -> Optional[str]:
    """
    Format a timestamp as ISO 8601 with a trailing Z.

    Args:
        ts: Aware or naive datetime; naive values are assumed to be UTC

    Returns:
        ISO string, or None when no timestamp is given
    """
    if ts is None:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def elapsed_seconds(start: Optional[datetime], end: Optional[datetime]) -> Optional[float]:
    """Seconds between two timestamps, or None if either is missing."""
    if start is None or end is None:
        return None
    return (end - start).total_seconds()


def new_session_id() -> str:
    """Short random identifier used to correlate session log lines."""
    return uuid.uuid4().hex[:12]
