"""
Task validation: gates, cache, failure tracking and the pipeline.

Gates (run in this order, all of them, every call):
    1. SchemaGate         required fields, types, ranges, datetime
    2. PIIGate            personal data in public fields
    3. ContentPolicyGate  prohibited / review-worthy content
    4. BudgetGate         budget floor and implied hourly rate
"""

from taskgate.validation.budget_validator import BudgetGate, validate_budget
from taskgate.validation.cache import TaskTypeConfigCache
from taskgate.validation.content_policy import ContentPolicyGate, scan_prohibited_content
from taskgate.validation.failure_tracker import FailureTracker
from taskgate.validation.gate import ValidationGate
from taskgate.validation.pii_scanner import PIIGate, scan_for_pii
from taskgate.validation.pipeline import ValidationPipeline, hash_payload, validate_task
from taskgate.validation.schema_validator import SchemaGate, validate_schema
from taskgate.validation.store import TaskStore, ValidationLogRecord
from taskgate.validation.task_creation import TaskValidationOutcome, run_task_validation
from taskgate.validation.types import (
    FieldSchema,
    TaskTypeConfig,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "BudgetGate",
    "ContentPolicyGate",
    "FailureTracker",
    "FieldSchema",
    "PIIGate",
    "SchemaGate",
    "TaskStore",
    "TaskTypeConfig",
    "TaskTypeConfigCache",
    "TaskValidationOutcome",
    "ValidationGate",
    "ValidationIssue",
    "ValidationLogRecord",
    "ValidationPipeline",
    "ValidationResult",
    "hash_payload",
    "run_task_validation",
    "scan_for_pii",
    "scan_prohibited_content",
    "validate_budget",
    "validate_schema",
    "validate_task",
]
