"""
Private data release: access control for private task fields.

Private fields (private_address, private_notes, private_contact) are
released only to:
    - the task's creator (the agent that posted it), at any time
    - an assigned worker, once the task is in an assigned-or-later status

Decryption is delegated to an injected PrivateFieldCipher; this module
never inspects ciphertext itself.  Released values never pass through
the PII or content scanners.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from taskgate.core.constants import TaskStatus
from taskgate.core.logging import get_logger
from taskgate.privacy.pii_patterns import PRIVATE_FIELDS
from taskgate.validation.errors import PrivateDataAccessError, TaskNotFoundError

logger = get_logger(__name__)

ALLOWED_STATUSES_FOR_WORKER = frozenset({
    TaskStatus.ASSIGNED,
    TaskStatus.IN_PROGRESS,
    TaskStatus.PENDING_REVIEW,
    TaskStatus.COMPLETED,
    TaskStatus.PENDING_ACCEPTANCE,
})


class PrivateFieldCipher(Protocol):
    """Encryption service seam."""

    def is_encrypted(self, value: str) -> bool: ...

    def decrypt(self, value: str) -> str: ...


def can_view_private_data(task: Mapping[str, Any], requesting_user_id: str) -> bool:
    """True when `requesting_user_id` may see the task's private fields."""
    if task.get("agent_id") == requesting_user_id:
        return True
    human_ids = task.get("human_ids") or ()
    is_assigned = task.get("human_id") == requesting_user_id or requesting_user_id in human_ids
    return is_assigned and task.get("status") in ALLOWED_STATUSES_FOR_WORKER


def release_private_data(
    task: Mapping[str, Any] | None,
    requesting_user_id: str,
    cipher: PrivateFieldCipher,
) -> dict[str, str | None]:
    """
    Return the decrypted private fields of `task` for an authorized requester.

    Raises:
        TaskNotFoundError: `task` is None.
        PrivateDataAccessError: requester is neither creator nor an
            assigned worker in an allowed status.
    """
    if task is None:
        raise TaskNotFoundError("Task not found")

    task_id = str(task.get("id", ""))
    is_agent = task.get("agent_id") == requesting_user_id
    human_ids = task.get("human_ids") or ()
    is_assigned = task.get("human_id") == requesting_user_id or requesting_user_id in human_ids

    if not is_agent and not is_assigned:
        logger.warning("Private data request denied", task_id=task_id, user_id=requesting_user_id)
        raise PrivateDataAccessError(
            "Not authorized to view private task data",
            task_id=task_id,
        )

    if not can_view_private_data(task, requesting_user_id):
        raise PrivateDataAccessError(
            "Private data is only available after task assignment",
            task_id=task_id,
            details={"status": task.get("status")},
        )

    released: dict[str, str | None] = {}
    for field in PRIVATE_FIELDS:
        value = task.get(field)
        if not value:
            released[field] = None
        elif cipher.is_encrypted(value):
            released[field] = cipher.decrypt(value)
        else:
            released[field] = value

    logger.info(
        "Private data released",
        task_id=task_id,
        user_id=requesting_user_id,
        role="agent" if is_agent else "worker",
    )
    return released
