"""Admin controls for the validation pipeline."""

from fastapi import APIRouter, Depends

from taskgate.api.deps import get_pipeline, require_admin
from taskgate.api.schemas.validation import FailureResetResponse, StatusResponse
from taskgate.validation.pipeline import ValidationPipeline

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)


@router.post("/flush-task-type-cache", response_model=StatusResponse)
async def flush_task_type_cache(
    pipeline: ValidationPipeline = Depends(get_pipeline),
) -> StatusResponse:
    """Make registry edits visible immediately instead of after the cache TTL."""
    pipeline.flush_task_type_cache()
    return StatusResponse(status="ok")


@router.post("/agents/{agent_id}/reset-failures", response_model=FailureResetResponse)
async def reset_agent_failures(
    agent_id: str,
    pipeline: ValidationPipeline = Depends(get_pipeline),
) -> FailureResetResponse:
    """Unlock an agent stuck at the consecutive-failure limit."""
    had_failures = pipeline.reset_failures(agent_id)
    return FailureResetResponse(agent_id=agent_id, had_failures=had_failures)
