"""
TaskValidationLog: append-only audit trail of validation calls.

One row per pipeline call (dry run or real).  Rows are never updated.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Uuid

from taskgate.db.models.base import Base, JSONType, generate_uuid, utcnow


class TaskValidationLog(Base):
    """A single validation attempt."""

    __tablename__ = "task_validation_log"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=generate_uuid)
    agent_id = Column(String(255), nullable=True, index=True)
    task_type_id = Column(String(64), nullable=True, index=True)
    payload_hash = Column(String(64), nullable=False)

    # passed | failed | flagged_for_review
    validation_result = Column(String(32), nullable=False)
    errors = Column(JSONType, default=list)
    policy_flags = Column(JSONType, default=list)

    attempt_number = Column(Integer, nullable=False, default=1)
    dry_run = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    def __repr__(self) -> str:
        return (
            f"<TaskValidationLog id={self.id} "
            f"agent={self.agent_id} "
            f"result={self.validation_result}>"
        )
