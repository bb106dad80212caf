"""status/timestamps.py

Heartbeat parsing. Columns hand us datetimes; JSON config blobs hand us ISO
strings (or worse). Anything that can't become an aware datetime is None.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import TypeAdapter, ValidationError

_DATETIME = TypeAdapter(datetime)


def as_utc(value: datetime) -> datetime:
    # Our DateTime columns are stored naive in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_heartbeat(value: Any) -> datetime | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = _DATETIME.validate_python(value)
    except (ValidationError, ValueError, TypeError, OverflowError):
        return None
    try:
        return as_utc(parsed)
    except (ValueError, OverflowError):
        return None
