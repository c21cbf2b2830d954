"""
Validation step shared by every task-creation entry point.

Task creation only validates payloads that name a task type; untyped
legacy tasks are created as before.  A flagged result means the task is
created but held in pending_review.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from taskgate.validation.pipeline import ValidationPipeline
from taskgate.validation.types import ValidationResult


@dataclass
class TaskValidationOutcome:
    proceed: bool
    flagged: bool = False
    error_response: dict[str, Any] | None = None


def failure_response(result: ValidationResult) -> dict[str, Any]:
    """Body for a 422 response listing every error at once."""
    return {
        "status": "validation_failed",
        "error_count": len(result.errors),
        "errors": [e.to_dict() for e in result.errors],
        "warnings": [w.to_dict() for w in result.warnings],
        "task_type_schema_url": result.task_type_schema_url,
    }


async def run_task_validation(
    pipeline: ValidationPipeline,
    payload: Mapping[str, Any],
    agent_id: str | None,
) -> TaskValidationOutcome:
    """
    Validate a task-creation payload for real (dry_run=False).

    `budget` is accepted as an alias for `budget_usd`.
    """
    if not (payload.get("task_type_id") or payload.get("task_type")):
        return TaskValidationOutcome(proceed=True)

    validation_payload = dict(payload)
    if not validation_payload.get("budget_usd"):
        validation_payload["budget_usd"] = payload.get("budget")

    result = await pipeline.validate_task(validation_payload, dry_run=False, agent_id=agent_id)

    if not result.valid:
        return TaskValidationOutcome(proceed=False, error_response=failure_response(result))

    return TaskValidationOutcome(proceed=True, flagged=result.flagged)
