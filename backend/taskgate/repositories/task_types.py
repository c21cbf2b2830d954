"""
Task type repository: data access for the task_type_registry table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskgate.db.models.task_type import TaskTypeRegistry

_MUTABLE_COLUMNS = (
    "display_name",
    "description",
    "category",
    "required_fields",
    "optional_fields",
    "field_schemas",
    "minimum_budget_usd",
    "maximum_duration_hr",
    "prohibited_keywords",
    "requires_address",
    "is_active",
)


async def get_task_type(db: AsyncSession, task_type_id: str) -> TaskTypeRegistry | None:
    """Fetch a task type by id, active or not."""
    return await db.get(TaskTypeRegistry, task_type_id)


async def get_active_task_type(db: AsyncSession, task_type_id: str) -> TaskTypeRegistry | None:
    """Fetch an active task type by id."""
    stmt = select(TaskTypeRegistry).where(
        TaskTypeRegistry.id == task_type_id,
        TaskTypeRegistry.is_active.is_(True),
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def list_active_task_types(db: AsyncSession) -> list[TaskTypeRegistry]:
    """All active task types ordered by category, then display name."""
    stmt = (
        select(TaskTypeRegistry)
        .where(TaskTypeRegistry.is_active.is_(True))
        .order_by(TaskTypeRegistry.category, TaskTypeRegistry.display_name)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def upsert_task_type(db: AsyncSession, data: Mapping[str, Any]) -> TaskTypeRegistry:
    """Insert a task type, or update the existing row with the same id."""
    row = await get_task_type(db, data["id"])
    if row is None:
        row = TaskTypeRegistry(id=data["id"])
        db.add(row)

    for key in _MUTABLE_COLUMNS:
        if key in data:
            setattr(row, key, data[key])

    await db.flush()
    return row


async def set_task_type_active(
    db: AsyncSession,
    task_type_id: str,
    is_active: bool,
) -> TaskTypeRegistry | None:
    """Activate or deactivate a task type."""
    row = await get_task_type(db, task_type_id)
    if row is None:
        return None
    row.is_active = is_active
    await db.flush()
    return row
