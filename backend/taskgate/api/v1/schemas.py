"""
Task type discovery endpoints: public, no auth required.

Agents read these before posting so they can build a passing payload
on the first try.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskgate.api.deps import get_db
from taskgate.api.schemas.validation import (
    TaskTypeConstraints,
    TaskTypeListResponse,
    TaskTypeSchemaResponse,
    TaskTypeSummary,
)
from taskgate.db.seed_data import EXAMPLE_PAYLOADS
from taskgate.repositories import task_types as task_type_repository

router = APIRouter(prefix="/schemas", tags=["Schemas"])


# ─── List ─────────────────────────────────────────────────
@router.get("", response_model=TaskTypeListResponse)
async def list_task_types(db: AsyncSession = Depends(get_db)) -> TaskTypeListResponse:
    """All active task types (summary only)."""
    rows = await task_type_repository.list_active_task_types(db)
    summaries = [TaskTypeSummary.model_validate(row) for row in rows]
    return TaskTypeListResponse(task_types=summaries, count=len(summaries))


# ─── Detail ───────────────────────────────────────────────
@router.get("/{task_type}", response_model=TaskTypeSchemaResponse)
async def get_task_type_schema(
    task_type: str,
    db: AsyncSession = Depends(get_db),
) -> TaskTypeSchemaResponse:
    """Full schema for one active task type, with constraints and an example payload."""
    row = await task_type_repository.get_active_task_type(db, task_type)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": f'Task type "{task_type}" not found or is inactive',
                "suggestion": "Use GET /api/schemas to see available task types",
            },
        )

    data = row.to_config_dict()
    data.pop("prohibited_keywords", None)

    return TaskTypeSchemaResponse(
        **data,
        constraints=TaskTypeConstraints(
            minimum_budget_usd=row.minimum_budget_usd,
            maximum_duration_hr=row.maximum_duration_hr,
        ),
        example_payload=EXAMPLE_PAYLOADS.get(task_type),
    )
