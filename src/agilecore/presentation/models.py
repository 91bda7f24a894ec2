"""Data models for the Presentation Formatter."""

from __future__ import annotations

from dataclasses import dataclass, field

from agilecore.domain.models import Board, Issue, IssueStatus, Sprint
from agilecore.statistics.models import BoardStats, SprintProgress, SprintStats


@dataclass(frozen=True)
class BoardView:
    """A board ready for display.

    Attributes:
        board: The underlying record.
        created_at: Display date, None when unknown.
        updated_at: Display date, None when unknown.
        last_updated: Relative description of the last update.
        issues_by_status: Every board column in display order, each with its
            issues sorted by order. Columns without issues are present and
            empty.
        stats: Aggregate counts over the board's issues.
        completion_percentage: Share of issues that are Done.
    """

    board: Board
    created_at: str | None
    updated_at: str | None
    last_updated: str
    issues_by_status: dict[IssueStatus, list[Issue]] = field(default_factory=dict)
    stats: BoardStats | None = None
    completion_percentage: int = 0


@dataclass(frozen=True)
class SprintView:
    """A sprint ready for display.

    Attributes:
        duration_days: Days from start to end, None without both dates or
            when the end precedes the start.
        capacity_used_percentage: Sprint story points over capacity, None
            without a capacity.
    """

    sprint: Sprint
    start_date: str | None
    end_date: str | None
    created_at: str | None
    duration_days: int | None
    stats: SprintStats
    progress: SprintProgress
    capacity_used_percentage: int | None = None


@dataclass(frozen=True)
class IssueView:
    """An issue ready for display."""

    issue: Issue
    created_at: str | None
    updated_at: str | None
    last_updated: str
    time_spent: str
    time_remaining: str
    original_estimate: str
