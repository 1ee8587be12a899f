"""Timestamp parsing and human-readable time formatting."""

from datetime import datetime, timedelta, timezone
from typing import Optional

ARRIVED = "Arrived"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_instant(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Accepts a trailing "Z" or an explicit offset. Naive timestamps, empty
    strings and anything unparsable give None.
    """
    if not value or not isinstance(value, str):
        return None
    s = value.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return None
    if dt.tzinfo is None:
        return None
    return dt.astimezone(timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """Serialize an aware datetime as ISO-8601 in UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()


def format_local(dt: datetime) -> str:
    """Format an instant in the local timezone, e.g. 'Nov 18, 2025 at 2:30 PM EST'."""
    local = dt.astimezone()
    hour = local.hour % 12 or 12
    return (
        f"{local.strftime('%b')} {local.day}, {local.year} at "
        f"{hour}:{local.minute:02d} {local.strftime('%p')} {local.strftime('%Z')}"
    ).rstrip()


def whole_minutes(delta: timedelta) -> int:
    """Minutes in delta, truncated toward zero."""
    return int(delta.total_seconds() / 60)


def format_remaining(delta: timedelta) -> str:
    """Format a time-to-arrival as '2h 30m' or '45m'; negative deltas read 'Arrived'."""
    seconds = int(delta.total_seconds())
    if seconds < 0:
        return ARRIVED
    hours = seconds // 3600
    minutes = abs(whole_minutes(delta) % 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
