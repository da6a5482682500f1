"""
Event vocabulary and timestamp handling for faunaset.

The remote service records every change to a set's membership as an
event with a microsecond timestamp:
- create: a resource was added to the set
- delete: a resource was removed from the set
- update: a member resource changed in place

Timestamps travel over the wire as integer microseconds since the Unix
epoch and are decoded into timezone-aware UTC datetimes.
"""

from datetime import datetime, timedelta, timezone
from typing import Union

__all__ = [
    'CREATE',
    'UPDATE',
    'DELETE',
    'EVENT_ACTIONS',
    'time_from_usecs',
    'usecs_from_time',
]


# =============================================================================
# EVENT ACTIONS
# =============================================================================

CREATE = 'create'
UPDATE = 'update'
DELETE = 'delete'

EVENT_ACTIONS = frozenset([CREATE, UPDATE, DELETE])


# =============================================================================
# TIMESTAMPS
# =============================================================================

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def time_from_usecs(usecs: Union[int, str]) -> datetime:
    """
    Decode a microsecond timestamp into a UTC datetime.

    Uses integer arithmetic so no precision is lost to float rounding.

    Args:
        usecs: Microseconds since the Unix epoch (int or string of digits)

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueError: If usecs is not an integer or a string of digits.
            Floats are rejected rather than truncated.
    """
    if isinstance(usecs, str) and usecs.removeprefix("-").isdecimal():
        usecs = int(usecs)
    if isinstance(usecs, bool) or not isinstance(usecs, int):
        raise ValueError(f"Cannot decode timestamp: {usecs!r}")
    try:
        return EPOCH + timedelta(microseconds=usecs)
    except OverflowError:
        raise ValueError(f"Timestamp out of range: {usecs!r}")


def usecs_from_time(value: datetime) -> int:
    """
    Encode a datetime as microseconds since the Unix epoch.

    Naive datetimes are treated as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - EPOCH
    return (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
