"""Process-wide database handle and timestamp time zone."""

from __future__ import annotations

from datetime import timezone, tzinfo
from typing import Any

_current_db: Any = None
_timestamp_location: tzinfo = timezone.utc


def set_db(db: Any) -> None:
    """Set the global database handle."""
    global _current_db
    _current_db = db


def get_db() -> Any:
    """Return the global database handle."""
    return _current_db


def begin() -> Any:
    """Begin a transaction on the global database handle."""
    starter = getattr(_current_db, "begin", None)
    if not callable(starter):
        raise TypeError("database does not support transactions")
    return starter()


def set_location(tz: tzinfo) -> None:
    """Set the time zone used for automatic created/updated timestamps."""
    global _timestamp_location
    _timestamp_location = tz


def get_location() -> tzinfo:
    """Return the time zone used for automatic timestamps."""
    return _timestamp_location