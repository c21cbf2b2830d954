"""
Private-field helpers.

Private fields hold PII on purpose (encrypted at rest) and must never
reach a public API response.  strip_private_fields() is the last line of
defence before a task row is serialised for clients.
"""

from __future__ import annotations

from typing import Any, Mapping

from taskgate.privacy.pii_patterns import PRIVATE_FIELDS


def strip_private_fields(task: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Return a shallow copy of `task` without private fields.  None passes through."""
    if task is None:
        return None
    return {key: value for key, value in task.items() if key not in PRIVATE_FIELDS}
