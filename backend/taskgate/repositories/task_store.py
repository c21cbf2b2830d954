"""
SqlTaskStore: TaskStore backed by the SQLAlchemy repositories.

Each call runs in its own session: the registry read is read-only, the
audit insert commits immediately so it survives whatever the caller does
next.  Database errors are re-raised as RegistryLookupError /
AuditLogError; the pipeline decides what to do with them.
"""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskgate.repositories import task_types, validation_logs
from taskgate.validation.errors import AuditLogError, RegistryLookupError
from taskgate.validation.store import ValidationLogRecord


class SqlTaskStore:
    """TaskStore over task_type_registry and task_validation_log."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def get_task_type_config(self, task_type_id: str) -> Mapping[str, Any] | None:
        try:
            async with self.session_factory() as session:
                row = await task_types.get_active_task_type(session, task_type_id)
                return row.to_config_dict() if row is not None else None
        except SQLAlchemyError as exc:
            raise RegistryLookupError(
                f"Registry lookup failed: {exc}",
                task_type_id=task_type_id,
            ) from exc

    async def insert_audit_record(self, record: ValidationLogRecord) -> None:
        try:
            async with self.session_factory() as session:
                await validation_logs.insert_validation_log(session, record)
                await session.commit()
        except SQLAlchemyError as exc:
            raise AuditLogError(
                f"Audit insert failed: {exc}",
                agent_id=record.agent_id,
                task_type_id=record.task_type_id,
            ) from exc
