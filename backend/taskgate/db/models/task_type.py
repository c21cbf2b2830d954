"""
TaskTypeRegistry: one row per task type an agent can post.

The validation pipeline reads active rows through a short-TTL cache, so
edits here become visible within TASK_TYPE_CACHE_TTL_SECONDS (or
immediately after POST /api/admin/flush-task-type-cache).
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import Boolean, DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskgate.db.models.base import Base, JSONType, utcnow


class TaskTypeRegistry(Base):
    __tablename__ = "task_type_registry"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    # Schema
    required_fields: Mapped[list[str]] = mapped_column(JSONType, default=list, nullable=False)
    optional_fields: Mapped[list[str]] = mapped_column(JSONType, default=list, nullable=False)
    field_schemas: Mapped[dict[str, Any]] = mapped_column(JSONType, default=dict, nullable=False)

    # Limits
    minimum_budget_usd: Mapped[Optional[float]] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=True
    )
    maximum_duration_hr: Mapped[Optional[float]] = mapped_column(
        Numeric(6, 2, asdecimal=False), nullable=True
    )
    prohibited_keywords: Mapped[list[str]] = mapped_column(JSONType, default=list, nullable=False)
    requires_address: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def to_config_dict(self) -> dict[str, Any]:
        """Column values in the shape TaskTypeConfig.from_mapping() expects."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "description": self.description,
            "category": self.category,
            "required_fields": list(self.required_fields or []),
            "optional_fields": list(self.optional_fields or []),
            "field_schemas": dict(self.field_schemas or {}),
            "minimum_budget_usd": self.minimum_budget_usd,
            "maximum_duration_hr": self.maximum_duration_hr,
            "prohibited_keywords": list(self.prohibited_keywords or []),
            "requires_address": self.requires_address,
            "is_active": self.is_active,
        }

    def __repr__(self) -> str:
        return f"<TaskTypeRegistry id={self.id} active={self.is_active}>"
