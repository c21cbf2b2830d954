"""
Domain-specific exception hierarchy for the validation pipeline.

All exceptions inherit from TaskGateError so callers can catch broadly
or narrowly as needed.  Each exception carries structured context
(agent ID, task type, etc.) for logging/debugging.

These are raised by collaborators (stores, private-data release), never
used to report validation findings: findings are ValidationIssue values.
"""

from __future__ import annotations


class TaskGateError(Exception):
    """Base exception for all task-gate errors."""

    def __init__(
        self,
        message: str,
        *,
        agent_id: str | None = None,
        task_type_id: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.agent_id = agent_id
        self.task_type_id = task_type_id
        self.details = details or {}
        super().__init__(message)


class RegistryLookupError(TaskGateError):
    """The task-type registry could not be read."""
    pass


class AuditLogError(TaskGateError):
    """Writing a validation audit record failed."""
    pass


class PrivateDataError(TaskGateError):
    """Base for private-field release failures."""

    def __init__(
        self,
        message: str,
        *,
        task_id: str | None = None,
        **kwargs,
    ) -> None:
        self.task_id = task_id
        super().__init__(message, **kwargs)


class TaskNotFoundError(PrivateDataError):
    """The requested task does not exist."""
    pass


class PrivateDataAccessError(PrivateDataError):
    """The requester may not see the task's private fields."""
    pass
