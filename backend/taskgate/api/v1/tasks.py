"""
Task validation endpoint: dry-run validation, no task is created.

    200  payload passes (possibly flagged for manual review)
    422  every error found, in one response
    429  agent locked out after consecutive failures
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from taskgate.api.deps import get_agent_id, get_pipeline
from taskgate.api.schemas.validation import ValidationFailedResponse, ValidationPassedResponse
from taskgate.core.constants import ErrorCode
from taskgate.validation.pipeline import ValidationPipeline
from taskgate.validation.task_creation import failure_response

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.post(
    "/validate",
    response_model=ValidationPassedResponse,
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ValidationFailedResponse},
        status.HTTP_429_TOO_MANY_REQUESTS: {"model": ValidationFailedResponse},
    },
)
async def validate_task(
    payload: dict[str, Any] = Body(...),
    agent_id: str = Depends(get_agent_id),
    pipeline: ValidationPipeline = Depends(get_pipeline),
):
    """Run every gate over `payload` and report all findings."""
    result = await pipeline.validate_task(payload, dry_run=True, agent_id=agent_id)

    if result.valid:
        return ValidationPassedResponse(
            task_type=payload.get("task_type") or payload.get("task_type_id"),
            warnings=[w.to_dict() for w in result.warnings],
            flagged=result.flagged,
        )

    status_code = (
        status.HTTP_429_TOO_MANY_REQUESTS
        if result.has_code(ErrorCode.RATE_LIMIT_EXCEEDED)
        else status.HTTP_422_UNPROCESSABLE_ENTITY
    )
    return JSONResponse(status_code=status_code, content=failure_response(result))
