"""Statistics Engine - Aggregates over board and sprint issue snapshots."""

from agilecore.statistics.models import (
    BoardStats,
    IssueBreakdown,
    ScopeCreep,
    SprintProgress,
    SprintStats,
)
from agilecore.statistics.stats import (
    board_stats,
    completion_percentage,
    issue_breakdown,
    percentage,
    round_half_up,
    scope_creep,
    sprint_issues,
    sprint_progress,
    sprint_stats,
)

__all__ = [
    "BoardStats",
    "IssueBreakdown",
    "ScopeCreep",
    "SprintProgress",
    "SprintStats",
    "board_stats",
    "completion_percentage",
    "issue_breakdown",
    "percentage",
    "round_half_up",
    "scope_creep",
    "sprint_issues",
    "sprint_progress",
    "sprint_stats",
]
