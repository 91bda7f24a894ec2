"""View models combining records with their derived statistics."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime

from agilecore.config import get_settings
from agilecore.domain.dates import days_between, format_display_date
from agilecore.domain.models import Board, Issue, Sprint
from agilecore.grouping import GroupDimension, group_by
from agilecore.ordering import sort_by_order
from agilecore.presentation.formatters import format_hours, format_relative_time
from agilecore.presentation.models import BoardView, IssueView, SprintView
from agilecore.statistics import (
    board_stats,
    completion_percentage,
    percentage,
    sprint_progress,
    sprint_stats,
)

logger = logging.getLogger(__name__)


def _display(value: date | datetime | None) -> str | None:
    if value is None:
        return None
    return format_display_date(value, get_settings().date_format)


def format_board(board: Board, issues: Iterable[Issue], now: datetime | None = None) -> BoardView:
    """Build the display view of a board.

    Issues whose status is not one of the board's columns are left out of
    issues_by_status but still count towards the statistics.
    """
    issues = list(issues)
    groups = group_by(issues, GroupDimension.STATUS)
    hidden = [status for status in groups if status not in board.columns]
    if hidden:
        logger.debug("Board %s has issues in statuses without a column: %s", board.id, hidden)

    return BoardView(
        board=board,
        created_at=_display(board.created_at),
        updated_at=_display(board.updated_at),
        last_updated=format_relative_time(board.updated_at, now),
        issues_by_status={status: sort_by_order(groups.get(status, [])) for status in board.columns},
        stats=board_stats(issues),
        completion_percentage=completion_percentage(issues),
    )


def format_sprint(
    sprint: Sprint,
    issues: Iterable[Issue],
    today: date | datetime | None = None,
) -> SprintView:
    """Build the display view of a sprint with its stats and progress."""
    stats = sprint_stats(sprint, issues)
    duration = None
    if sprint.has_dates:
        duration = days_between(sprint.start_date, sprint.end_date)
        if duration < 0:
            duration = None

    capacity_used = None
    if sprint.capacity_story_points:
        capacity_used = percentage(stats.total_story_points, sprint.capacity_story_points)

    return SprintView(
        sprint=sprint,
        start_date=_display(sprint.start_date),
        end_date=_display(sprint.end_date),
        created_at=_display(sprint.created_at),
        duration_days=duration,
        stats=stats,
        progress=sprint_progress(sprint, today),
        capacity_used_percentage=capacity_used,
    )


def format_issue(issue: Issue, now: datetime | None = None) -> IssueView:
    """Build the display view of an issue."""
    return IssueView(
        issue=issue,
        created_at=_display(issue.created_at),
        updated_at=_display(issue.updated_at),
        last_updated=format_relative_time(issue.updated_at, now),
        time_spent=format_hours(issue.time_spent),
        time_remaining=format_hours(issue.time_remaining),
        original_estimate=format_hours(issue.original_estimate),
    )
