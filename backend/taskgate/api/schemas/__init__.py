"""API schema package."""

from taskgate.api.schemas.validation import (
    FailureResetResponse,
    IssueResponse,
    StatusResponse,
    TaskTypeListResponse,
    TaskTypeSchemaResponse,
    TaskTypeSummary,
    ValidationFailedResponse,
    ValidationPassedResponse,
)

__all__ = [
    "FailureResetResponse",
    "IssueResponse",
    "StatusResponse",
    "TaskTypeListResponse",
    "TaskTypeSchemaResponse",
    "TaskTypeSummary",
    "ValidationFailedResponse",
    "ValidationPassedResponse",
]
