"""Pydantic models for the REST API.

Request and response bodies use camelCase keys on the wire; snake_case is
accepted on input as well.
"""

from datetime import date, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from agilecore.domain.models import IssueId, IssueStatus, IssueType, Priority
from agilecore.domain.records import IssueRecord, SprintRecord
from agilecore.ordering.models import ScopeKind

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


class _Body(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Request models


class IssuesRequest(_Body):
    """A snapshot of issues."""

    issues: list[IssueRecord] = Field(default_factory=list)


class SprintIssuesRequest(_Body):
    """A sprint and a snapshot of issues (filtered by sprint id)."""

    sprint: SprintRecord
    issues: list[IssueRecord] = Field(default_factory=list)


class SprintProgressRequest(_Body):
    """A sprint and an optional reference time."""

    sprint: SprintRecord
    today: date | datetime | None = None


class BurndownRequest(SprintIssuesRequest):
    """Burndown request; label_format overrides the configured date format."""

    label_format: str | None = None


class ReorderRequest(_Body):
    """A drag-completion event within one scope.

    target_index is taken as-is and clamped by the engine, so a malformed
    index still produces a usable result.
    """

    issues: list[IssueRecord] = Field(default_factory=list)
    moved_issue_id: IssueId
    target_index: Any = None


class ScopeBody(_Body):
    """A board column (key = status) or sprint backlog (key = sprint id)."""

    kind: ScopeKind
    key: IssueId | None = None


class MoveRequest(_Body):
    """A drag-completion event that may cross scopes."""

    issues: list[IssueRecord] = Field(default_factory=list)
    issue_id: IssueId
    destination: ScopeBody
    target_index: Any = None


class RenormalizeRequest(_Body):
    """One scope's issues and an optional stride override."""

    issues: list[IssueRecord] = Field(default_factory=list)
    stride: float | None = Field(default=None, gt=0)


# Response models


class BoardStatsResponse(_Body):
    """Aggregate counts over a board's issues."""

    total_issues: int
    completed_issues: int
    blocked_issues: int
    total_story_points: int
    completed_story_points: int


class SprintStatsResponse(_Body):
    """Aggregate counts over one sprint's issues."""

    total_issues: int
    completed_issues: int
    in_progress_issues: int
    blocked_issues: int
    total_story_points: int
    completed_story_points: int
    completion_percentage: int
    velocity: int


class CompletionResponse(_Body):
    """Share of Done issues."""

    completion_percentage: int


class IssueBreakdownResponse(_Body):
    """Issue counts per status, priority and type."""

    total: int
    by_status: dict[IssueStatus, int]
    by_priority: dict[Priority, int]
    by_type: dict[IssueType, int]
    total_story_points: int
    total_time_spent: float
    total_time_remaining: float


class SprintProgressResponse(_Body):
    """Elapsed share of a sprint's calendar span."""

    days_elapsed: int
    total_days: int
    progress_percentage: int
    days_remaining: int
    is_overdue: bool


class ScopeCreepResponse(_Body):
    """Growth of a sprint's story points over its baseline."""

    baseline_points: int | None
    current_points: int
    creep_ratio: float | None
    threshold: float
    exceeded: bool


class OrderUpdateResponse(_Body):
    """New order value for one issue."""

    issue_id: IssueId
    order: float


class MoveResponse(_Body):
    """Result of a cross-scope move."""

    issue: IssueRecord | None
    updates: list[OrderUpdateResponse]
    reparented: bool


class BurndownResponse(_Body):
    """Burndown series; degraded marks placeholder actual values."""

    labels: list[str]
    ideal_line: list[float]
    actual_line: list[int]
    degraded: bool


class ValidationResponse(_Body):
    """Per-field validation errors."""

    is_valid: bool
    errors: dict[str, str]


class HealthResponse(_Body):
    """Liveness report."""

    status: str
    version: str
