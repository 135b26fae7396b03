"""
Common field helpers shared by request schemas
"""
from datetime import datetime
from typing import Optional

# Upper bound of the INTEGER primary keys
MAX_ID = 2147483647


def to_naive_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a client datetime for TIMESTAMP WITHOUT TIME ZONE columns.

    Columns store naive local time (the same clock as datetime.now()), so an
    aware value such as "2025-01-01T10:00:00Z" is converted to local time and
    stripped of its offset. Naive values pass through unchanged.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
