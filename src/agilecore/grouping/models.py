"""Data models for the Grouping Engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from agilecore.domain.models import IssueId, IssueStatus, IssueType, Priority

# Group key for issues without an assignee
UNASSIGNED = "unassigned"


class GroupDimension(StrEnum):
    """Issue attribute to partition by."""

    STATUS = "status"
    PRIORITY = "priority"
    ASSIGNEE = "assignee"


class SortKey(StrEnum):
    """Issue attribute to sort by."""

    ORDER = "order"
    TITLE = "title"
    PRIORITY = "priority"
    STORY_POINTS = "story_points"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


@dataclass(frozen=True)
class IssueFilter:
    """Criteria an issue must match; unset criteria match everything.

    Attributes:
        status: Only issues in this status.
        priority: Only issues with this priority.
        issue_type: Only issues of this type.
        assignee_id: Only issues assigned to this user.
        search: Case-insensitive substring of the title.
    """

    status: IssueStatus | None = None
    priority: Priority | None = None
    issue_type: IssueType | None = None
    assignee_id: IssueId | None = None
    search: str | None = None
