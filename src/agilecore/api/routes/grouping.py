"""Grouping endpoints."""

from fastapi import APIRouter

from agilecore.api.models import APIResponse, IssuesRequest
from agilecore.domain.exceptions import InputShapeError
from agilecore.domain.records import IssueRecord
from agilecore.grouping import group_by

router = APIRouter(prefix="/grouping", tags=["grouping"])


@router.post("/{dimension}", response_model=APIResponse[dict[str, list[IssueRecord]]])
def group_issues(dimension: str, body: IssuesRequest) -> APIResponse[dict[str, list[IssueRecord]]]:
    """Partition issues by status, priority or assignee.

    Groups keep the order in which their first issue appears. JSON object
    keys are strings, so groups whose keys render the same (assignee ids
    1 and "1") are rejected rather than merged.
    """
    groups = group_by([issue.to_domain() for issue in body.issues], dimension)
    data: dict[str, list[IssueRecord]] = {}
    for key, members in groups.items():
        name = str(key)
        if name in data:
            raise InputShapeError(f"Groups {name!r} collide: assignee ids must not differ only by type")
        data[name] = [IssueRecord.model_validate(issue) for issue in members]
    return APIResponse(data=data)
