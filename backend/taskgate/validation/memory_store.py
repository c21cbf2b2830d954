"""
InMemoryTaskStore: dict-backed TaskStore for local runs and tests.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from taskgate.validation.store import ValidationLogRecord


class InMemoryTaskStore:
    """Registry rows and audit records held in plain Python containers."""

    def __init__(self, task_types: Iterable[Mapping[str, Any]] = ()) -> None:
        self.task_types: dict[str, dict[str, Any]] = {t["id"]: dict(t) for t in task_types}
        self.audit_records: list[ValidationLogRecord] = []
        self.lookups = 0

    def put_task_type(self, data: Mapping[str, Any]) -> None:
        self.task_types[data["id"]] = dict(data)

    async def get_task_type_config(self, task_type_id: str) -> Mapping[str, Any] | None:
        self.lookups += 1
        row = self.task_types.get(task_type_id)
        if row is None or not row.get("is_active", True):
            return None
        return row

    async def insert_audit_record(self, record: ValidationLogRecord) -> None:
        self.audit_records.append(record)
