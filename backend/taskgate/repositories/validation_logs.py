"""
Validation log repository: append-only writes to task_validation_log.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskgate.db.models.validation_log import TaskValidationLog
from taskgate.validation.store import ValidationLogRecord


async def insert_validation_log(db: AsyncSession, record: ValidationLogRecord) -> TaskValidationLog:
    """Append one audit row."""
    row = TaskValidationLog(
        agent_id=record.agent_id,
        task_type_id=record.task_type_id,
        payload_hash=record.payload_hash,
        validation_result=record.validation_result,
        errors=list(record.errors),
        policy_flags=list(record.policy_flags),
        attempt_number=record.attempt_number,
        dry_run=record.dry_run,
        created_at=record.created_at,
    )
    db.add(row)
    await db.flush()
    return row


async def list_validation_logs(
    db: AsyncSession,
    *,
    agent_id: str | None = None,
    task_type_id: str | None = None,
    offset: int = 0,
    limit: int = 50,
) -> list[TaskValidationLog]:
    """Newest-first audit rows with optional agent / task type filters."""
    stmt = select(TaskValidationLog).order_by(TaskValidationLog.created_at.desc())
    if agent_id is not None:
        stmt = stmt.where(TaskValidationLog.agent_id == agent_id)
    if task_type_id is not None:
        stmt = stmt.where(TaskValidationLog.task_type_id == task_type_id)
    stmt = stmt.offset(offset).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())
