"""Burndown Generator - Builds the ideal and actual burndown lines of a sprint."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime

from agilecore.burndown.models import BurndownSeries
from agilecore.config import get_settings
from agilecore.domain.dates import ONE_DAY, days_between, format_display_date, to_date, to_datetime
from agilecore.domain.models import Issue, Sprint
from agilecore.statistics import sprint_issues

logger = logging.getLogger(__name__)


def remaining_points_on(issues: Iterable[Issue], day: date | datetime) -> int:
    """Story points not yet Done by the end of a calendar day.

    Done issues without a completed_at timestamp count as done on every day.
    """
    cutoff = to_date(day)
    remaining = 0
    for issue in issues:
        if not issue.is_done:
            remaining += issue.points
        elif issue.completed_at is not None and to_date(issue.completed_at) > cutoff:
            remaining += issue.points
    return remaining


def _ideal_line(total_points: int, total_days: int) -> list[float]:
    # A zero-length sprint is due the day it starts, so nothing should remain.
    if total_days == 0:
        return [0.0]
    return [max(0.0, total_points * (1 - day / total_days)) for day in range(total_days + 1)]


def _has_history(issues: Sequence[Issue]) -> bool:
    return all(issue.completed_at is not None for issue in issues if issue.is_done)


def generate_burndown(
    sprint: Sprint,
    issues: Iterable[Issue],
    *,
    label_format: str | None = None,
) -> BurndownSeries:
    """Generate the burndown series for a sprint.

    The actual line is rebuilt from each Done issue's completed_at. If any
    Done issue in the sprint has no completion timestamp the history cannot
    be reconstructed; every day then reports the current remaining total and
    the series is flagged as degraded.

    Args:
        sprint: The sprint; without both dates the series is empty.
        issues: Any issue snapshot; filtered by sprint_id.
        label_format: Date format for labels ("short" or a strftime pattern).
            Defaults to the configured date format.

    Returns:
        BurndownSeries with total_days + 1 entries per line.
    """
    if not sprint.has_dates:
        logger.debug("Sprint %s has no date range, burndown is empty", sprint.id)
        return BurndownSeries()

    total_days = days_between(sprint.start_date, sprint.end_date)
    if total_days < 0:
        logger.warning("Sprint %s ends before it starts, burndown is empty", sprint.id)
        return BurndownSeries()

    if label_format is None:
        label_format = get_settings().date_format

    in_sprint = sprint_issues(sprint, issues)
    total_points = sum(issue.points for issue in in_sprint)
    start = to_datetime(sprint.start_date)
    days = [start + ONE_DAY * offset for offset in range(total_days + 1)]

    degraded = not _has_history(in_sprint)
    if degraded:
        current = sum(issue.points for issue in in_sprint if not issue.is_done)
        logger.warning(
            "Sprint %s has Done issues without completion dates, burndown actual line is a placeholder",
            sprint.id,
        )
        actual = [current] * len(days)
    else:
        actual = [remaining_points_on(in_sprint, day) for day in days]

    return BurndownSeries(
        labels=[format_display_date(day, label_format) for day in days],
        ideal_line=_ideal_line(total_points, total_days),
        actual_line=actual,
        degraded=degraded,
    )
