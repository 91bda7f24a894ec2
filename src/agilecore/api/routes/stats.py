"""Statistics endpoints."""

from fastapi import APIRouter

from agilecore.api.models import (
    APIResponse,
    BoardStatsResponse,
    CompletionResponse,
    IssueBreakdownResponse,
    IssuesRequest,
    ScopeCreepResponse,
    SprintIssuesRequest,
    SprintProgressRequest,
    SprintProgressResponse,
    SprintStatsResponse,
)
from agilecore.statistics import (
    board_stats,
    completion_percentage,
    issue_breakdown,
    scope_creep,
    sprint_progress,
    sprint_stats,
)

router = APIRouter(prefix="/stats", tags=["statistics"])


@router.post("/board", response_model=APIResponse[BoardStatsResponse])
def get_board_stats(body: IssuesRequest) -> APIResponse[BoardStatsResponse]:
    """Aggregate counts and story points over a board's issues."""
    stats = board_stats(issue.to_domain() for issue in body.issues)
    return APIResponse(data=BoardStatsResponse.model_validate(stats))


@router.post("/sprint", response_model=APIResponse[SprintStatsResponse])
def get_sprint_stats(body: SprintIssuesRequest) -> APIResponse[SprintStatsResponse]:
    """Aggregate counts, completion and velocity for one sprint."""
    stats = sprint_stats(body.sprint.to_domain(), [issue.to_domain() for issue in body.issues])
    return APIResponse(data=SprintStatsResponse.model_validate(stats))


@router.post("/completion", response_model=APIResponse[CompletionResponse])
def get_completion(body: IssuesRequest) -> APIResponse[CompletionResponse]:
    """Share of issues that are Done."""
    value = completion_percentage([issue.to_domain() for issue in body.issues])
    return APIResponse(data=CompletionResponse(completion_percentage=value))


@router.post("/breakdown", response_model=APIResponse[IssueBreakdownResponse])
def get_breakdown(body: IssuesRequest) -> APIResponse[IssueBreakdownResponse]:
    """Issue counts by status, priority and type."""
    breakdown = issue_breakdown(issue.to_domain() for issue in body.issues)
    return APIResponse(data=IssueBreakdownResponse.model_validate(breakdown))


@router.post("/progress", response_model=APIResponse[SprintProgressResponse])
def get_progress(body: SprintProgressRequest) -> APIResponse[SprintProgressResponse]:
    """How far through its calendar span a sprint is."""
    progress = sprint_progress(body.sprint.to_domain(), body.today)
    return APIResponse(data=SprintProgressResponse.model_validate(progress))


@router.post("/scope-creep", response_model=APIResponse[ScopeCreepResponse])
def get_scope_creep(body: SprintIssuesRequest) -> APIResponse[ScopeCreepResponse]:
    """Growth of a sprint's story points over its baseline."""
    creep = scope_creep(body.sprint.to_domain(), [issue.to_domain() for issue in body.issues])
    return APIResponse(data=ScopeCreepResponse.model_validate(creep))
