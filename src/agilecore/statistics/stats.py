"""Statistics Engine - Counts, story-point sums and completion ratios."""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import assert_never

from agilecore.domain.dates import days_between, to_datetime, utcnow
from agilecore.domain.models import Issue, IssueStatus, Sprint
from agilecore.statistics.models import (
    BoardStats,
    IssueBreakdown,
    ScopeCreep,
    SprintProgress,
    SprintStats,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def percentage(part: float, whole: float) -> int:
    """Whole-number percentage of part over whole, 0 when whole is 0."""
    if whole <= 0:
        return 0
    return round_half_up(100 * part / whole)


@dataclass
class _Tally:
    total: int = 0
    todo: int = 0
    in_progress: int = 0
    done: int = 0
    blocked: int = 0
    points: int = 0
    done_points: int = 0


def _tally(issues: Iterable[Issue]) -> _Tally:
    tally = _Tally()
    for issue in issues:
        tally.total += 1
        tally.points += issue.points
        match issue.status:
            case IssueStatus.TODO:
                tally.todo += 1
            case IssueStatus.IN_PROGRESS:
                tally.in_progress += 1
            case IssueStatus.DONE:
                tally.done += 1
                tally.done_points += issue.points
            case IssueStatus.BLOCKED:
                tally.blocked += 1
            case _:
                assert_never(issue.status)
    return tally


def sprint_issues(sprint: Sprint, issues: Iterable[Issue]) -> list[Issue]:
    """Return the issues whose sprint_id points at this sprint."""
    return [issue for issue in issues if issue.sprint_id is not None and issue.sprint_id == sprint.id]


def board_stats(issues: Iterable[Issue]) -> BoardStats:
    """Count issues and sum story points across a board.

    Unestimated issues contribute 0 story points.
    """
    tally = _tally(issues)
    return BoardStats(
        total_issues=tally.total,
        completed_issues=tally.done,
        blocked_issues=tally.blocked,
        total_story_points=tally.points,
        completed_story_points=tally.done_points,
    )


def sprint_stats(sprint: Sprint, issues: Iterable[Issue]) -> SprintStats:
    """Compute statistics for the issues that belong to a sprint.

    Issues from other sprints (or the backlog) in the input are ignored.

    Args:
        sprint: The sprint to report on.
        issues: Any issue snapshot; filtered by sprint_id.

    Returns:
        SprintStats where velocity equals the completed story points.
    """
    tally = _tally(sprint_issues(sprint, issues))
    return SprintStats(
        total_issues=tally.total,
        completed_issues=tally.done,
        in_progress_issues=tally.in_progress,
        blocked_issues=tally.blocked,
        total_story_points=tally.points,
        completed_story_points=tally.done_points,
        completion_percentage=percentage(tally.done_points, tally.points),
        velocity=tally.done_points,
    )


def completion_percentage(issues: Sequence[Issue]) -> int:
    """Share of issues that are Done, as a whole percentage (0 when empty)."""
    tally = _tally(issues)
    return percentage(tally.done, tally.total)


def issue_breakdown(issues: Iterable[Issue]) -> IssueBreakdown:
    """Count issues by status, priority and type and total their effort."""
    issues = list(issues)
    return IssueBreakdown(
        total=len(issues),
        by_status=dict(Counter(issue.status for issue in issues)),
        by_priority=dict(Counter(issue.priority for issue in issues)),
        by_type=dict(Counter(issue.issue_type for issue in issues)),
        total_story_points=sum(issue.points for issue in issues),
        total_time_spent=sum(issue.time_spent or 0 for issue in issues),
        total_time_remaining=sum(issue.time_remaining or 0 for issue in issues),
    )


def sprint_progress(sprint: Sprint, today: date | datetime | None = None) -> SprintProgress:
    """Report how much of a sprint's calendar span has elapsed.

    Args:
        sprint: The sprint; without both dates, or with an end before the
            start, every field is zero.
        today: Reference point. Defaults to the current UTC time.

    Returns:
        SprintProgress for the reference point.
    """
    if not sprint.has_dates:
        return SprintProgress()

    now = utcnow() if today is None else today
    total_days = days_between(sprint.start_date, sprint.end_date)
    if total_days < 0:
        logger.warning("Sprint %s ends before it starts, progress is empty", sprint.id)
        return SprintProgress()

    elapsed = max(0, days_between(sprint.start_date, now))

    return SprintProgress(
        days_elapsed=min(elapsed, total_days),
        total_days=total_days,
        progress_percentage=min(100, percentage(elapsed, total_days)),
        days_remaining=max(0, total_days - elapsed),
        is_overdue=to_datetime(now) > to_datetime(sprint.end_date),
    )


def scope_creep(sprint: Sprint, issues: Iterable[Issue]) -> ScopeCreep:
    """Compare a sprint's current story points with its baseline.

    Without a baseline (None or 0) there is nothing to compare against and
    the ratio is None.
    """
    current = sum(issue.points for issue in sprint_issues(sprint, issues))
    baseline = sprint.baseline_points
    threshold = sprint.scope_threshold_pct

    if not baseline:
        return ScopeCreep(
            baseline_points=baseline,
            current_points=current,
            creep_ratio=None,
            threshold=threshold,
            exceeded=False,
        )

    ratio = (current - baseline) / baseline
    exceeded = ratio >= threshold
    if exceeded:
        logger.info(
            "Sprint %s scope grew %.0f%% over baseline (%d -> %d points)",
            sprint.id,
            ratio * 100,
            baseline,
            current,
        )
    return ScopeCreep(
        baseline_points=baseline,
        current_points=current,
        creep_ratio=ratio,
        threshold=threshold,
        exceeded=exceeded,
    )
