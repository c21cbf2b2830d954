"""
FailureTracker: consecutive validation failures per agent.

Keyed by agent id alone: changing the payload between failing attempts
still counts toward the lockout.  The payload hash is kept for
observability only.  A success deletes the entry entirely.

There is no time-based decay.  Once an agent reaches the limit, only an
explicit reset() (admin action) clears it.
"""

from __future__ import annotations

from dataclasses import dataclass

from taskgate.core.config import settings


@dataclass
class FailureTrackerEntry:
    count: int = 0
    last_payload_hash: str | None = None


class FailureTracker:
    """Per-process map of agent id -> FailureTrackerEntry."""

    def __init__(self, max_consecutive_failures: int | None = None) -> None:
        self.max_consecutive_failures = (
            settings.MAX_CONSECUTIVE_FAILURES
            if max_consecutive_failures is None
            else max_consecutive_failures
        )
        self._entries: dict[str | None, FailureTrackerEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def count(self, agent_id: str | None) -> int:
        entry = self._entries.get(agent_id)
        return entry.count if entry else 0

    def entry(self, agent_id: str | None) -> FailureTrackerEntry | None:
        return self._entries.get(agent_id)

    def is_locked(self, agent_id: str | None) -> bool:
        return self.count(agent_id) >= self.max_consecutive_failures

    def record_failure(self, agent_id: str | None, payload_hash: str) -> int:
        """Increment (creating if absent) and return the new count."""
        entry = self._entries.setdefault(agent_id, FailureTrackerEntry())
        entry.count += 1
        entry.last_payload_hash = payload_hash
        return entry.count

    def reset(self, agent_id: str | None) -> bool:
        """Delete the agent's entry.  Returns True if one existed."""
        return self._entries.pop(agent_id, None) is not None

    def clear(self) -> None:
        self._entries.clear()
