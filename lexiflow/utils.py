"""Utility functions shared across layers."""

import math
from datetime import UTC, datetime


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite drops the offset on read)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up.

    The builtin ``round`` sends halves to the even neighbour (``round(12.5) == 12``);
    scores and percentages here always round 12.5 to 13.
    """
    return math.floor(value + 0.5)


def round_to(value: float, ndigits: int) -> float:
    """``round_half_up`` at ``ndigits`` decimal places."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor
