"""Data models for the Ordering Engine."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum

from agilecore.domain.models import Issue, IssueId, IssueStatus, SprintId


class ScopeKind(StrEnum):
    """Kind of collection whose issues share one order sequence."""

    COLUMN = "column"
    SPRINT_BACKLOG = "sprint_backlog"


@dataclass(frozen=True)
class Scope:
    """A board column (issues sharing a status) or a sprint backlog.

    Attributes:
        kind: Column or sprint backlog.
        key: The column's status, or the backlog's sprint id (None for the
            product backlog of issues outside any sprint).
    """

    kind: ScopeKind
    key: IssueStatus | SprintId | None

    @classmethod
    def column(cls, status: IssueStatus | str) -> Scope:
        return cls(kind=ScopeKind.COLUMN, key=IssueStatus(status))

    @classmethod
    def sprint_backlog(cls, sprint_id: SprintId | None) -> Scope:
        return cls(kind=ScopeKind.SPRINT_BACKLOG, key=sprint_id)

    def contains(self, issue: Issue) -> bool:
        if self.kind == ScopeKind.COLUMN:
            return issue.status == self.key
        return issue.sprint_id == self.key

    def reparent(self, issue: Issue) -> Issue:
        """Return a copy of the issue moved into this scope."""
        if self.kind == ScopeKind.COLUMN:
            return replace(issue, status=IssueStatus(self.key))
        return replace(issue, sprint_id=self.key)


@dataclass(frozen=True)
class OrderUpdate:
    """New order value for one issue, to be persisted by the caller."""

    issue_id: IssueId
    order: float


@dataclass(frozen=True)
class MoveResult:
    """Outcome of dragging an issue, possibly into another scope.

    Attributes:
        issue: The moved issue with its new scope and order, None if the
            issue was not in the snapshot.
        updates: Order changes to persist, in final sequence order.
        reparented: True when the issue changed status or sprint.
    """

    issue: Issue | None
    updates: list[OrderUpdate] = field(default_factory=list)
    reparented: bool = False
