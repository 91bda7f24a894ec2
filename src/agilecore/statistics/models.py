"""Data models for the Statistics Engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from agilecore.domain.models import IssueStatus, IssueType, Priority


@dataclass(frozen=True)
class BoardStats:
    """Aggregate counts over a board's issues.

    completed_story_points never exceeds total_story_points.
    """

    total_issues: int
    completed_issues: int
    blocked_issues: int
    total_story_points: int
    completed_story_points: int


@dataclass(frozen=True)
class SprintStats:
    """Aggregate counts over the issues of one sprint.

    Attributes:
        completion_percentage: Completed share of story points, 0-100.
        velocity: Story points completed within the sprint.
    """

    total_issues: int
    completed_issues: int
    in_progress_issues: int
    blocked_issues: int
    total_story_points: int
    completed_story_points: int
    completion_percentage: int
    velocity: int


@dataclass(frozen=True)
class IssueBreakdown:
    """Issue counts per status, priority and type plus effort totals."""

    total: int
    by_status: dict[IssueStatus, int] = field(default_factory=dict)
    by_priority: dict[Priority, int] = field(default_factory=dict)
    by_type: dict[IssueType, int] = field(default_factory=dict)
    total_story_points: int = 0
    total_time_spent: float = 0.0
    total_time_remaining: float = 0.0


@dataclass(frozen=True)
class SprintProgress:
    """How far through its calendar span a sprint is.

    Attributes:
        days_elapsed: Days since the start, capped at total_days.
        total_days: Length of the sprint in days.
        progress_percentage: days_elapsed as a share of total_days, 0-100.
        days_remaining: Days left until the end date.
        is_overdue: True once the end date has passed.
    """

    days_elapsed: int = 0
    total_days: int = 0
    progress_percentage: int = 0
    days_remaining: int = 0
    is_overdue: bool = False


@dataclass(frozen=True)
class ScopeCreep:
    """Growth of a sprint's committed work over its baseline.

    Attributes:
        baseline_points: Points committed at sprint start (None if unknown).
        current_points: Points currently in the sprint.
        creep_ratio: (current - baseline) / baseline, None without a baseline.
        threshold: Ratio at which growth counts as scope creep.
        exceeded: True when creep_ratio reached the threshold.
    """

    baseline_points: int | None
    current_points: int
    creep_ratio: float | None
    threshold: float
    exceeded: bool
