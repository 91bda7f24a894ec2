"""Presentation Formatter - Display strings and view models for the UI."""

from agilecore.presentation.formatters import (
    format_date,
    format_datetime,
    format_hours,
    format_relative_time,
    format_short_date,
    is_today,
    is_within_last_week,
)
from agilecore.presentation.models import BoardView, IssueView, SprintView
from agilecore.presentation.views import format_board, format_issue, format_sprint

__all__ = [
    "BoardView",
    "IssueView",
    "SprintView",
    "format_board",
    "format_date",
    "format_datetime",
    "format_hours",
    "format_issue",
    "format_relative_time",
    "format_short_date",
    "format_sprint",
    "is_today",
    "is_within_last_week",
]
