"""Ordering Engine - Order values for drag-and-drop moves within a scope."""

from agilecore.ordering.models import MoveResult, OrderUpdate, Scope, ScopeKind
from agilecore.ordering.ordering import (
    apply_order_updates,
    clamp_index,
    issues_in_scope,
    move_issue,
    needs_renormalization,
    renormalize,
    reorder,
    sort_by_order,
)

__all__ = [
    "MoveResult",
    "OrderUpdate",
    "Scope",
    "ScopeKind",
    "apply_order_updates",
    "clamp_index",
    "issues_in_scope",
    "move_issue",
    "needs_renormalization",
    "renormalize",
    "reorder",
    "sort_by_order",
]
