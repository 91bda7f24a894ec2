"""Validation endpoints, consulted before edits are sent to the issue store."""

from typing import Any

from fastapi import APIRouter, Body, Query

from agilecore.api.models import APIResponse, ValidationResponse
from agilecore.validation import validate_board, validate_issue, validate_sprint

router = APIRouter(prefix="/validation", tags=["validation"])


@router.post("/board", response_model=APIResponse[ValidationResponse])
def check_board(
    data: Any = Body(...),
    partial: bool = Query(default=False, description="Update semantics"),
) -> APIResponse[ValidationResponse]:
    """Validate proposed board fields."""
    return APIResponse(data=ValidationResponse.model_validate(validate_board(data, partial=partial)))


@router.post("/sprint", response_model=APIResponse[ValidationResponse])
def check_sprint(
    data: Any = Body(...),
    partial: bool = Query(default=False, description="Update semantics"),
) -> APIResponse[ValidationResponse]:
    """Validate proposed sprint fields."""
    return APIResponse(data=ValidationResponse.model_validate(validate_sprint(data, partial=partial)))


@router.post("/issue", response_model=APIResponse[ValidationResponse])
def check_issue(
    data: Any = Body(...),
    partial: bool = Query(default=False, description="Update semantics"),
) -> APIResponse[ValidationResponse]:
    """Validate proposed issue fields."""
    return APIResponse(data=ValidationResponse.model_validate(validate_issue(data, partial=partial)))
