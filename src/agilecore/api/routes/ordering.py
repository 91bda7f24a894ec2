"""Ordering endpoints for drag-and-drop moves."""

from fastapi import APIRouter

from agilecore.api.dependencies import SettingsDep
from agilecore.api.models import (
    APIResponse,
    MoveRequest,
    MoveResponse,
    OrderUpdateResponse,
    RenormalizeRequest,
    ReorderRequest,
    ScopeBody,
)
from agilecore.domain.exceptions import InputShapeError
from agilecore.domain.records import IssueRecord
from agilecore.ordering import Scope, ScopeKind, move_issue, renormalize, reorder

router = APIRouter(prefix="/ordering", tags=["ordering"])


def _to_scope(body: ScopeBody) -> Scope:
    if body.kind == ScopeKind.COLUMN:
        try:
            return Scope.column(str(body.key))
        except ValueError as e:
            raise InputShapeError(f"Unknown column status {body.key!r}") from e
    return Scope.sprint_backlog(body.key)


@router.post("/reorder", response_model=APIResponse[list[OrderUpdateResponse]])
def reorder_issue(
    body: ReorderRequest, settings: SettingsDep
) -> APIResponse[list[OrderUpdateResponse]]:
    """Move an issue within its scope; returns only the changed order values."""
    updates = reorder(
        [issue.to_domain() for issue in body.issues],
        body.moved_issue_id,
        body.target_index,
        step=settings.order_step,
    )
    return APIResponse(data=[OrderUpdateResponse.model_validate(update) for update in updates])


@router.post("/move", response_model=APIResponse[MoveResponse])
def move(body: MoveRequest, settings: SettingsDep) -> APIResponse[MoveResponse]:
    """Move an issue into a column or sprint backlog, re-parenting it if needed."""
    result = move_issue(
        [issue.to_domain() for issue in body.issues],
        body.issue_id,
        _to_scope(body.destination),
        body.target_index,
        step=settings.order_step,
    )
    return APIResponse(
        data=MoveResponse(
            issue=IssueRecord.model_validate(result.issue) if result.issue is not None else None,
            updates=[OrderUpdateResponse.model_validate(update) for update in result.updates],
            reparented=result.reparented,
        )
    )


@router.post("/renormalize", response_model=APIResponse[list[OrderUpdateResponse]])
def renormalize_scope(
    body: RenormalizeRequest, settings: SettingsDep
) -> APIResponse[list[OrderUpdateResponse]]:
    """Renumber a scope to evenly spaced order values."""
    stride = body.stride if body.stride is not None else settings.renormalize_stride
    updates = renormalize([issue.to_domain() for issue in body.issues], stride)
    return APIResponse(data=[OrderUpdateResponse.model_validate(update) for update in updates])
