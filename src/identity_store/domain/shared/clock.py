"""UTC clock used for lockout timestamps.

Lockout ends are stored and reported in UTC. Naive values from callers are
read as UTC rather than local time.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` in UTC, tagging naive values instead of converting them."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
