"""Burndown endpoint."""

from fastapi import APIRouter

from agilecore.api.dependencies import SettingsDep
from agilecore.api.models import APIResponse, BurndownRequest, BurndownResponse
from agilecore.burndown import generate_burndown

router = APIRouter(prefix="/burndown", tags=["burndown"])


@router.post("", response_model=APIResponse[BurndownResponse])
def get_burndown(body: BurndownRequest, settings: SettingsDep) -> APIResponse[BurndownResponse]:
    """Ideal and actual burndown for a sprint.

    Check `degraded` before plotting the actual line: when set, the issues
    carried no completion history and the line is a placeholder.
    """
    series = generate_burndown(
        body.sprint.to_domain(),
        [issue.to_domain() for issue in body.issues],
        label_format=body.label_format or settings.date_format,
    )
    return APIResponse(data=BurndownResponse.model_validate(series))
