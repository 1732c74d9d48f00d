"""Time helpers. All stored timestamps are naive UTC."""

from datetime import datetime, timezone


def utcnow():
    """Current UTC time as a naive datetime (matches the DateTime columns)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
