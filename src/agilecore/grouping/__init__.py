"""Grouping Engine - Buckets issues by status, priority or assignee."""

from agilecore.grouping.grouping import filter_issues, group_by, group_key, sort_issues
from agilecore.grouping.models import UNASSIGNED, GroupDimension, IssueFilter, SortKey

__all__ = [
    "UNASSIGNED",
    "GroupDimension",
    "IssueFilter",
    "SortKey",
    "filter_issues",
    "group_by",
    "group_key",
    "sort_issues",
]
