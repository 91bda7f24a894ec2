"""Domain records for boards, sprints and issues."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

IssueId = int | str
SprintId = int | str


class IssueStatus(StrEnum):
    """Workflow status of an issue; doubles as a board column."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"
    BLOCKED = "Blocked"


class Priority(StrEnum):
    """Issue priority, P1 highest."""

    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"


class IssueType(StrEnum):
    """Kind of work an issue tracks."""

    STORY = "Story"
    BUG = "Bug"
    TASK = "Task"
    EPIC = "Epic"


class BoardType(StrEnum):
    """Board flavour."""

    KANBAN = "kanban"
    SCRUM = "scrum"


class SprintStatus(StrEnum):
    """Sprint lifecycle state."""

    PLANNING = "Planning"
    ACTIVE = "Active"
    COMPLETED = "Completed"


@dataclass(frozen=True)
class Assignee:
    """Reference to the user an issue is assigned to."""

    id: IssueId
    display_name: str


@dataclass(frozen=True)
class Issue:
    """A unit of work tracked on a board.

    Attributes:
        id: Opaque unique identifier.
        title: Short summary.
        status: Current workflow status (the board column it sits in).
        priority: P1-P4.
        order: Position within its column or sprint backlog; unique and
            strictly increasing within that scope.
        story_points: Effort estimate, None when unestimated.
        assignee: Assigned user, None when unassigned.
        sprint_id: Sprint the issue belongs to, None when in the backlog.
        issue_type: Story, bug, task or epic.
        completed_at: When the issue reached Done, if known.
        blocked_reason: Why the issue is blocked.
        time_spent: Logged hours.
        time_remaining: Estimated hours left.
        original_estimate: Hours estimated at creation.
    """

    id: IssueId
    title: str
    status: IssueStatus = IssueStatus.TODO
    priority: Priority = Priority.P3
    order: float = 0.0
    story_points: int | None = None
    assignee: Assignee | None = None
    sprint_id: SprintId | None = None
    issue_type: IssueType = IssueType.STORY
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    completed_at: datetime | None = None
    blocked_reason: str | None = None
    time_spent: float | None = None
    time_remaining: float | None = None
    original_estimate: float | None = None

    @property
    def is_done(self) -> bool:
        return self.status == IssueStatus.DONE

    @property
    def points(self) -> int:
        """Story points, counting unestimated issues as 0."""
        return self.story_points or 0


@dataclass(frozen=True)
class Board:
    """A named workspace whose issues are organized into status columns.

    The board references issues by snapshot only; callers pass the issue
    collection to the engines alongside it.
    """

    id: IssueId
    name: str
    type: BoardType = BoardType.KANBAN
    description: str | None = None
    columns: tuple[IssueStatus, ...] = field(default_factory=lambda: tuple(IssueStatus))
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Sprint:
    """A time-boxed subset of issues with a goal and capacity.

    Attributes:
        id: Sprint identifier; issues point back to it through sprint_id.
        name: Display name.
        status: Planning, Active or Completed.
        goal: What the sprint aims to deliver.
        start_date: First calendar day.
        end_date: Last calendar day.
        capacity_story_points: Planned capacity (0-1000).
        baseline_points: Story points committed when the sprint started.
        scope_threshold_pct: Growth ratio over the baseline that counts as
            scope creep (0.2 means 20%).
    """

    id: SprintId
    name: str
    status: SprintStatus = SprintStatus.PLANNING
    goal: str | None = None
    start_date: date | datetime | None = None
    end_date: date | datetime | None = None
    capacity_story_points: int | None = None
    baseline_points: int | None = None
    scope_threshold_pct: float = 0.2
    created_at: datetime | None = None

    @property
    def has_dates(self) -> bool:
        return self.start_date is not None and self.end_date is not None
