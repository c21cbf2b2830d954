"""
TaskStore: the persistence seam used by the validation pipeline.

The pipeline performs I/O at exactly two points: reading a task type
from the registry (on a cache miss) and writing one audit record per
call.  Anything satisfying this protocol can back the pipeline; the
SQLAlchemy implementation lives in taskgate.repositories.task_store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Protocol


@dataclass
class ValidationLogRecord:
    """One row for the validation audit log."""

    agent_id: str | None
    task_type_id: str | None
    payload_hash: str
    validation_result: str          # ValidationOutcome value
    errors: list[dict[str, Any]] = field(default_factory=list)
    policy_flags: list[dict[str, Any]] = field(default_factory=list)
    attempt_number: int = 1
    dry_run: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """Serialise for JSONB storage."""
        return {
            "agent_id": self.agent_id,
            "task_type_id": self.task_type_id,
            "payload_hash": self.payload_hash,
            "validation_result": self.validation_result,
            "errors": self.errors,
            "policy_flags": self.policy_flags,
            "attempt_number": self.attempt_number,
            "dry_run": self.dry_run,
            "created_at": self.created_at.isoformat(),
        }


class TaskStore(Protocol):
    """Registry reads and audit writes."""

    async def get_task_type_config(self, task_type_id: str) -> Mapping[str, Any] | None:
        """Return the active registry row for `task_type_id`, or None."""
        ...

    async def insert_audit_record(self, record: ValidationLogRecord) -> None:
        """Persist one audit record.  May raise; callers treat it as best-effort."""
        ...
