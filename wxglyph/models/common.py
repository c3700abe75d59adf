"""Common time helpers shared across models."""

from datetime import UTC, date, datetime


def local_now() -> datetime:
    return datetime.now(UTC).astimezone()


def time_for(seconds: int) -> datetime:
    """Convert epoch seconds to a timezone-aware local datetime."""
    return datetime.fromtimestamp(seconds, UTC).astimezone()


def date_for(seconds: int) -> date:
    """Local calendar date containing the given epoch second."""
    return time_for(seconds).date()
