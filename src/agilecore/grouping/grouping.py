"""Grouping Engine - Partitions, filters and sorts issue collections."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import assert_never

from agilecore.domain.exceptions import InputShapeError
from agilecore.domain.models import Issue
from agilecore.grouping.models import UNASSIGNED, GroupDimension, IssueFilter, SortKey

logger = logging.getLogger(__name__)


def _coerce_dimension(dimension: GroupDimension | str) -> GroupDimension:
    try:
        return GroupDimension(dimension)
    except ValueError as e:
        allowed = ", ".join(d.value for d in GroupDimension)
        raise InputShapeError(f"Unknown group dimension {dimension!r} (expected {allowed})") from e


def group_key(issue: Issue, dimension: GroupDimension) -> Hashable:
    """Return the bucket an issue falls into for a dimension."""
    match dimension:
        case GroupDimension.STATUS:
            return issue.status
        case GroupDimension.PRIORITY:
            return issue.priority
        case GroupDimension.ASSIGNEE:
            return issue.assignee.id if issue.assignee is not None else UNASSIGNED
        case _:
            assert_never(dimension)


def group_by(issues: Iterable[Issue], dimension: GroupDimension | str) -> dict[Hashable, list[Issue]]:
    """Partition issues by status, priority or assignee.

    The partition is stable: groups appear in the order their first issue
    appears, and each group keeps the input's relative order.

    Args:
        issues: Issues to partition.
        dimension: A GroupDimension or its string value.

    Returns:
        Group key -> issues in that group. Empty input gives an empty dict.

    Raises:
        InputShapeError: If the dimension is not one of the known values.
    """
    dimension = _coerce_dimension(dimension)

    groups: dict[Hashable, list[Issue]] = {}
    for issue in issues:
        groups.setdefault(group_key(issue, dimension), []).append(issue)

    logger.debug("Grouped issues by %s into %d groups", dimension.value, len(groups))
    return groups


def _matches(issue: Issue, criteria: IssueFilter) -> bool:
    if criteria.status is not None and issue.status != criteria.status:
        return False
    if criteria.priority is not None and issue.priority != criteria.priority:
        return False
    if criteria.issue_type is not None and issue.issue_type != criteria.issue_type:
        return False
    if criteria.assignee_id is not None:
        if issue.assignee is None or issue.assignee.id != criteria.assignee_id:
            return False
    return not criteria.search or criteria.search.lower() in issue.title.lower()


def filter_issues(issues: Iterable[Issue], criteria: IssueFilter) -> list[Issue]:
    """Return the issues matching every set criterion, in input order."""
    return [issue for issue in issues if _matches(issue, criteria)]


def sort_issues(
    issues: Iterable[Issue],
    key: SortKey | str = SortKey.ORDER,
    descending: bool = False,
) -> list[Issue]:
    """Sort issues by one attribute.

    The sort is stable and issues without a value for the key always come
    last, whichever direction is requested.

    Raises:
        InputShapeError: If the key is not a sortable attribute.
    """
    try:
        key = SortKey(key)
    except ValueError as e:
        raise InputShapeError(f"Cannot sort issues by {key!r}") from e
    present: list[Issue] = []
    absent: list[Issue] = []
    for issue in issues:
        (absent if getattr(issue, key.value) is None else present).append(issue)

    present.sort(key=lambda issue: getattr(issue, key.value), reverse=descending)
    return present + absent
