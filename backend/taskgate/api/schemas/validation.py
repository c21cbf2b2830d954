"""Validation and task-type schema request/response models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class IssueResponse(BaseModel):
    """One error or warning, as returned to the calling agent."""

    field: str
    code: str
    message: str
    suggestion: str | None = None
    detected: str | None = None
    constraint: dict[str, Any] | None = None


class ValidationPassedResponse(BaseModel):
    status: Literal["valid"] = "valid"
    task_type: str | None = None
    warnings: list[IssueResponse] = Field(default_factory=list)
    flagged: bool = False


class ValidationFailedResponse(BaseModel):
    status: Literal["validation_failed"] = "validation_failed"
    error_count: int = Field(..., ge=0)
    errors: list[IssueResponse]
    warnings: list[IssueResponse] = Field(default_factory=list)
    task_type_schema_url: str | None = None


class TaskTypeSummary(BaseModel):
    """Row of GET /api/schemas."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    display_name: str
    description: str | None = None
    category: str | None = None
    minimum_budget_usd: float | None = None
    maximum_duration_hr: float | None = None
    requires_address: bool = False
    is_active: bool = True


class TaskTypeListResponse(BaseModel):
    task_types: list[TaskTypeSummary]
    count: int


class TaskTypeConstraints(BaseModel):
    minimum_budget_usd: float | None = None
    maximum_duration_hr: float | None = None


class TaskTypeSchemaResponse(TaskTypeSummary):
    """Full schema for one task type.  prohibited_keywords are never exposed."""

    required_fields: list[str] = Field(default_factory=list)
    optional_fields: list[str] = Field(default_factory=list)
    field_schemas: dict[str, dict[str, Any]] = Field(default_factory=dict)
    constraints: TaskTypeConstraints
    example_payload: dict[str, Any] | None = None


class FailureResetResponse(BaseModel):
    status: Literal["ok"] = "ok"
    agent_id: str
    had_failures: bool


class StatusResponse(BaseModel):
    status: str
