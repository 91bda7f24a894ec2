"""Domain - Issue, board and sprint records shared by every engine."""

from agilecore.domain.exceptions import AgileCoreError, InputShapeError
from agilecore.domain.models import (
    Assignee,
    Board,
    BoardType,
    Issue,
    IssueId,
    IssueStatus,
    IssueType,
    Priority,
    Sprint,
    SprintId,
    SprintStatus,
)
from agilecore.domain.records import (
    AssigneeRecord,
    BoardRecord,
    IssueRecord,
    SprintRecord,
    parse_board,
    parse_issue,
    parse_issues,
    parse_sprint,
)

__all__ = [
    "AgileCoreError",
    "Assignee",
    "AssigneeRecord",
    "Board",
    "BoardRecord",
    "BoardType",
    "InputShapeError",
    "Issue",
    "IssueId",
    "IssueRecord",
    "IssueStatus",
    "IssueType",
    "Priority",
    "Sprint",
    "SprintId",
    "SprintRecord",
    "SprintStatus",
    "parse_board",
    "parse_issue",
    "parse_issues",
    "parse_sprint",
]
