"""Shared constants and enums used across the application."""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable, machine-readable codes attached to validation findings."""

    INVALID_TASK_TYPE = "INVALID_TASK_TYPE"
    MISSING_REQUIRED = "MISSING_REQUIRED"
    INVALID_TYPE = "INVALID_TYPE"
    BELOW_MINIMUM = "BELOW_MINIMUM"
    ABOVE_MAXIMUM = "ABOVE_MAXIMUM"
    STRING_TOO_SHORT = "STRING_TOO_SHORT"
    STRING_TOO_LONG = "STRING_TOO_LONG"
    ARRAY_TOO_FEW = "ARRAY_TOO_FEW"
    INVALID_VALUE = "INVALID_VALUE"
    INVALID_DATETIME = "INVALID_DATETIME"
    BUDGET_BELOW_MINIMUM = "BUDGET_BELOW_MINIMUM"
    DURATION_EXCEEDS_MAX = "DURATION_EXCEEDS_MAX"
    PII_DETECTED = "PII_DETECTED"
    PROHIBITED_CONTENT = "PROHIBITED_CONTENT"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Warning-only codes
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    HIGH_BUDGET_WARNING = "HIGH_BUDGET_WARNING"


class ValidationOutcome(StrEnum):
    """Coarse verdict written to the validation audit log."""

    PASSED = "passed"
    FAILED = "failed"
    FLAGGED_FOR_REVIEW = "flagged_for_review"


class FieldType(StrEnum):
    """Value types a task type may declare in its field schemas."""

    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"


class TaskStatus(StrEnum):
    """Task lifecycle states relevant to private-field release."""

    OPEN = "open"
    PENDING_ACCEPTANCE = "pending_acceptance"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    PENDING_REVIEW = "pending_review"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
