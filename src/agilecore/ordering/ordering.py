"""Ordering Engine - Computes order values after a drag-and-drop move.

Order values are floats that are unique and strictly increasing within a
scope. A move renumbers as few issues as possible: normally just the moved
one, placed at the midpoint of its new neighbours. Repeated midpoint
insertion eventually exhausts float precision, so callers can check
needs_renormalization() and persist renormalize() when it trips.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import replace

from agilecore.config import get_settings
from agilecore.domain.models import Issue, IssueId
from agilecore.ordering.models import MoveResult, OrderUpdate, Scope

logger = logging.getLogger(__name__)


def sort_by_order(issues: Iterable[Issue]) -> list[Issue]:
    """Sort by order value; equal values keep their input order."""
    return sorted(issues, key=lambda issue: issue.order)


def issues_in_scope(issues: Iterable[Issue], scope: Scope) -> list[Issue]:
    """Select the issues belonging to a scope, in input order."""
    return [issue for issue in issues if scope.contains(issue)]


def clamp_index(target_index: object, length: int) -> int:
    """Coerce a drop position into [0, length].

    Values that are not numbers (or NaN) land at the end rather than
    failing, so a bad drag event still leaves the board usable.
    """
    if isinstance(target_index, float) and math.isinf(target_index):
        return 0 if target_index < 0 else length
    try:
        index = int(target_index)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        logger.warning("Drop index %r is not a number, moving to the end", target_index)
        return length
    return max(0, min(index, length))


def _chain_is_increasing(lower: float | None, values: list[float], upper: float | None) -> bool:
    bounded = [lower, *values, upper] if lower is not None else [*values, upper]
    if upper is None:
        bounded.pop()
    return all(a < b for a, b in zip(bounded, bounded[1:], strict=False))


def _spread(lower: float | None, upper: float | None, count: int, step: float) -> list[float] | None:
    """Spread count values strictly between lower and upper.

    Missing bounds are open ends, filled in step-sized increments. Returns
    None when the gap cannot hold count distinct values.
    """
    if lower is None and upper is None:
        values = [step * (i + 1) for i in range(count)]
    elif lower is None:
        values = [upper - step * (count - i) for i in range(count)]
    elif upper is None:
        values = [lower + step * (i + 1) for i in range(count)]
    else:
        gap = (upper - lower) / (count + 1)
        values = [lower + gap * (i + 1) for i in range(count)]

    if _chain_is_increasing(lower, values, upper):
        return values

    # Steps too small to register at this magnitude; walk adjacent floats.
    if upper is None and lower is not None:
        values = []
        current = lower
        for _ in range(count):
            current = math.nextafter(current, math.inf)
            values.append(current)
        return values
    if lower is None and upper is not None:
        values = []
        current = upper
        for _ in range(count):
            current = math.nextafter(current, -math.inf)
            values.append(current)
        return values[::-1]
    return None


def _place(rest: Sequence[Issue], moved: Issue, index: int, step: float) -> list[OrderUpdate]:
    """Insert moved into rest at index and renumber the affected run.

    The run starts at the moved issue and grows forward only while the gap
    to the next untouched issue cannot hold it (neighbours tie, or the gap
    is below float resolution).
    """
    sequence = [*rest[:index], moved, *rest[index:]]
    lower = rest[index - 1].order if index > 0 else None

    end = index + 1
    while True:
        upper = sequence[end].order if end < len(sequence) else None
        values = _spread(lower, upper, end - index, step)
        if values is not None:
            break
        end += 1

    if end - index > 1:
        logger.info("Order gap exhausted at position %d, renumbered %d issues", index, end - index)

    return [
        OrderUpdate(issue_id=issue.id, order=value)
        for issue, value in zip(sequence[index:end], values, strict=True)
        if issue is moved or issue.order != value
    ]


def reorder(
    scope_issues: Iterable[Issue],
    moved_issue_id: IssueId,
    target_index: object,
    *,
    step: float | None = None,
) -> list[OrderUpdate]:
    """Move an issue to a new position within its scope.

    Args:
        scope_issues: Every issue of one column or sprint backlog (the issues
            in scope).
        moved_issue_id: Id of the dragged issue.
        target_index: Position in the scope (after removing the moved issue)
            to drop it at; clamped to the valid range.
        step: Distance from the neighbour when dropped at either end.
            Defaults to the configured order step.

    Returns:
        (issue id, new order) pairs in final sequence order. Empty for a
        move onto the current position, an empty scope or an unknown id.
    """
    if step is None:
        step = get_settings().order_step

    ordered = sort_by_order(scope_issues)
    current = next((pos for pos, issue in enumerate(ordered) if issue.id == moved_issue_id), None)
    if current is None:
        if ordered:
            logger.warning("Issue %s is not in the scope being reordered", moved_issue_id)
        return []

    moved = ordered[current]
    rest = ordered[:current] + ordered[current + 1 :]
    index = clamp_index(target_index, len(rest))
    if index == current:
        logger.debug("Issue %s dropped on its own position", moved_issue_id)
        return []

    updates = _place(rest, moved, index, step)
    logger.info(
        "Moved issue %s from position %d to %d (%d order updates)",
        moved_issue_id,
        current,
        index,
        len(updates),
    )
    return updates


def move_issue(
    issues: Iterable[Issue],
    issue_id: IssueId,
    destination: Scope,
    target_index: object,
    *,
    step: float | None = None,
) -> MoveResult:
    """Drag an issue into a scope, changing its status or sprint if needed.

    Args:
        issues: Snapshot containing at least the moved issue and every issue
            of the destination scope.
        issue_id: Id of the dragged issue.
        destination: Column or sprint backlog it was dropped into.
        target_index: Drop position within the destination.
        step: Boundary step, defaults to the configured order step.

    Returns:
        MoveResult with the re-parented issue and the order updates.
    """
    if step is None:
        step = get_settings().order_step

    issues = list(issues)
    moved = next((issue for issue in issues if issue.id == issue_id), None)
    if moved is None:
        logger.warning("Issue %s is not in the snapshot, nothing to move", issue_id)
        return MoveResult(issue=None)

    if destination.contains(moved):
        updates = reorder(issues_in_scope(issues, destination), issue_id, target_index, step=step)
        return MoveResult(issue=_apply_to(moved, updates), updates=updates)

    reparented = destination.reparent(moved)
    rest = sort_by_order(issue for issue in issues_in_scope(issues, destination) if issue.id != issue_id)
    index = clamp_index(target_index, len(rest))
    updates = _place(rest, reparented, index, step)
    logger.info(
        "Moved issue %s into %s %s at position %d",
        issue_id,
        destination.kind.value,
        destination.key,
        index,
    )
    return MoveResult(issue=_apply_to(reparented, updates), updates=updates, reparented=True)


def _apply_to(issue: Issue, updates: Iterable[OrderUpdate]) -> Issue:
    for update in updates:
        if update.issue_id == issue.id:
            return replace(issue, order=update.order)
    return issue


def apply_order_updates(issues: Iterable[Issue], updates: Iterable[OrderUpdate]) -> list[Issue]:
    """Return copies of the issues with new order values, sorted by order."""
    new_orders = {update.issue_id: update.order for update in updates}
    return sort_by_order(
        replace(issue, order=new_orders[issue.id]) if issue.id in new_orders else issue
        for issue in issues
    )


def needs_renormalization(issues: Iterable[Issue], min_gap: float | None = None) -> bool:
    """True when two adjacent order values in a scope are closer than min_gap.

    Ties count as too close. min_gap defaults to the configured value.
    """
    if min_gap is None:
        min_gap = get_settings().min_order_gap
    orders = [issue.order for issue in sort_by_order(issues)]
    return any(b - a < min_gap for a, b in zip(orders, orders[1:], strict=False))


def renormalize(issues: Iterable[Issue], stride: float | None = None) -> list[OrderUpdate]:
    """Renumber a scope to evenly spaced integer multiples of stride.

    Keeps the current sequence (ties in input order) and returns updates
    only for issues whose value changes.
    """
    if stride is None:
        stride = get_settings().renormalize_stride

    updates = [
        OrderUpdate(issue_id=issue.id, order=stride * position)
        for position, issue in enumerate(sort_by_order(issues), start=1)
        if issue.order != stride * position
    ]
    logger.info("Renormalized scope: %d order values changed", len(updates))
    return updates
