"""Date parsing and calendar arithmetic shared by the engines."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, timedelta

from agilecore.config import SHORT_DATE_FORMAT

ONE_DAY = timedelta(days=1)


def parse_date(value: object) -> date | datetime | None:
    """Parse a date or timestamp.

    Accepts date/datetime objects and ISO 8601 strings, including the
    trailing "Z" and "+0000" offsets Jira-style APIs emit.

    Args:
        value: The value to parse. None and blank strings mean "absent".

    Returns:
        A date for date-only strings, a datetime otherwise, None if absent.

    Raises:
        ValueError: If the value is present but not a recognizable date.
    """
    if value is None:
        return None
    if isinstance(value, datetime | date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a date string, got {type(value).__name__}")

    text = value.strip()
    if not text:
        return None
    if len(text) == 10:
        return date.fromisoformat(text)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    elif len(text) > 5 and text[-5] in "+-" and text[-4:].isdigit() and ":" not in text[-5:]:
        text = f"{text[:-2]}:{text[-2:]}"
    return datetime.fromisoformat(text)


def to_datetime(value: date | datetime) -> datetime:
    """Normalize to a naive UTC datetime so mixed inputs can be compared."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(UTC).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def utcnow() -> datetime:
    """Current time as a naive UTC datetime, comparable with to_datetime() values."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return to_datetime(value).date()
    return value


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Whole days from start to end, rounding partial days up."""
    return math.ceil((to_datetime(end) - to_datetime(start)) / ONE_DAY)


def format_short_date(value: date | datetime) -> str:
    """Render a date as M/D/YYYY, e.g. "1/5/2024"."""
    day = to_date(value)
    return f"{day.month}/{day.day}/{day.year}"


def format_display_date(value: date | datetime, date_format: str = SHORT_DATE_FORMAT) -> str:
    """Render a date with the configured display format."""
    if date_format == SHORT_DATE_FORMAT:
        return format_short_date(value)
    return to_date(value).strftime(date_format)
