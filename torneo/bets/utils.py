"""Utility functions for the bets blueprint."""

from __future__ import annotations

import datetime
from typing import Any

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
TICKET_PREFIX = "TICKET-"


def to_datetime(value: Any) -> datetime.datetime | None:
    """Convert a stored bet timestamp into an aware UTC datetime.

    Handles plain datetimes (naive ones are taken as UTC), Firestore
    timestamps exposing ``to_datetime()`` and ISO-8601 strings.
    """
    if value is None:
        return None
    if not isinstance(value, datetime.datetime) and hasattr(value, "to_datetime"):
        value = value.to_datetime()
    if isinstance(value, str):
        value = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
    if not isinstance(value, datetime.datetime):
        raise TypeError(f"Unsupported timestamp: {value!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value


def epoch_millis(value: Any) -> int:
    """Milliseconds since the Unix epoch for a bet timestamp."""
    moment = to_datetime(value)
    if moment is None:
        return 0
    return (moment - EPOCH) // datetime.timedelta(milliseconds=1)


def ticket_id(timestamp: Any) -> str:
    """Display label of a bet, e.g. ``TICKET-1704067200000``.

    Two bets placed in the same millisecond share a label.
    """
    return f"{TICKET_PREFIX}{epoch_millis(timestamp)}"


def format_timestamp(timestamp: Any) -> str:
    """Human readable date and time of a bet."""
    moment = to_datetime(timestamp)
    if moment is None:
        return ""
    return moment.strftime("%d/%m/%Y, %H:%M:%S")
