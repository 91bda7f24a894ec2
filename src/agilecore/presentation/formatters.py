"""Date, time and effort formatting for display."""

from __future__ import annotations

from datetime import date, datetime

from agilecore.domain import dates

NO_DATE = "No date"
NEVER_UPDATED = "Never updated"

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY

# Largest unit first; the first one that fits the elapsed time is used
_RELATIVE_UNITS = (
    (_YEAR, "year"),
    (_MONTH, "month"),
    (_WEEK, "week"),
    (_DAY, "day"),
    (_HOUR, "hour"),
    (_MINUTE, "minute"),
)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_date(value: date | datetime | str | None) -> str:
    """Render a date like "Jan 15, 2024", or "No date" when absent."""
    parsed = dates.parse_date(value)
    if parsed is None:
        return NO_DATE
    day = dates.to_date(parsed)
    return f"{day:%b} {day.day}, {day.year}"


def format_datetime(value: date | datetime | str | None) -> str:
    """Render a timestamp like "January 15, 2024 at 3:30 PM"."""
    parsed = dates.parse_date(value)
    if parsed is None:
        return NO_DATE
    moment = dates.to_datetime(parsed)
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%B} {moment.day}, {moment.year} at {hour}:{moment:%M} {meridiem}"


def format_short_date(value: date | datetime | str | None) -> str | None:
    """Render a date as M/D/YYYY, None when absent."""
    parsed = dates.parse_date(value)
    if parsed is None:
        return None
    return dates.format_short_date(parsed)


def format_relative_time(value: date | datetime | str | None, now: datetime | None = None) -> str:
    """Describe how long ago something was updated.

    Args:
        value: When the update happened.
        now: Reference point. Defaults to the current UTC time.

    Returns:
        "Updated just now", "Updated 3 hours ago", ... or "Never updated".
    """
    parsed = dates.parse_date(value)
    if parsed is None:
        return NEVER_UPDATED
    reference = dates.utcnow() if now is None else dates.to_datetime(now)
    seconds = int((reference - dates.to_datetime(parsed)).total_seconds())

    for size, unit in _RELATIVE_UNITS:
        if seconds >= size:
            return f"Updated {_plural(seconds // size, unit)} ago"
    return "Updated just now"


def format_hours(hours: float | None) -> str:
    """Render an effort in hours: "0h", "5h", "1d", "1d 2h".

    A day is 24 hours.
    """
    if not hours:
        return "0h"
    if hours < 24:
        return f"{hours:g}h"
    days, remainder = divmod(hours, 24)
    if remainder:
        return f"{int(days)}d {remainder:g}h"
    return f"{int(days)}d"


def is_today(value: date | datetime | str | None, today: date | datetime | None = None) -> bool:
    """True when the value falls on the reference calendar day."""
    parsed = dates.parse_date(value)
    if parsed is None:
        return False
    reference = dates.utcnow() if today is None else today
    return dates.to_date(parsed) == dates.to_date(reference)


def is_within_last_week(value: date | datetime | str | None, now: datetime | None = None) -> bool:
    """True when the value is at most 7 whole days before the reference."""
    parsed = dates.parse_date(value)
    if parsed is None:
        return False
    reference = dates.utcnow() if now is None else dates.to_datetime(now)
    return (reference - dates.to_datetime(parsed)).days <= 7
