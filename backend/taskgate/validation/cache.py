"""
TaskTypeConfigCache: short-TTL read-through cache over the registry.

Hits live for `ttl` seconds.  Misses are cached too, but their
loaded_at is backdated so they expire after `negative_ttl` instead,
which lets a fresh registry write become visible sooner.  flush() clears
everything (admin control plane).

The cache is per process.  Several service instances each hold their own
copy; a registry change is visible everywhere within one TTL window.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

from taskgate.core.config import settings
from taskgate.core.logging import get_logger
from taskgate.validation.store import TaskStore
from taskgate.validation.types import TaskTypeConfig

logger = get_logger(__name__)


def utcnow() -> datetime:
    """UTC-aware now."""
    return datetime.now(timezone.utc)


@dataclass
class CacheEntry:
    config: TaskTypeConfig | None
    loaded_at: datetime


class TaskTypeConfigCache:
    """Read-through cache of TaskTypeConfig snapshots keyed by task type id."""

    def __init__(
        self,
        store: TaskStore,
        *,
        ttl: float | None = None,
        negative_ttl: float | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.store = store
        self.ttl = timedelta(seconds=settings.TASK_TYPE_CACHE_TTL_SECONDS if ttl is None else ttl)
        self.negative_ttl = timedelta(
            seconds=settings.TASK_TYPE_NEGATIVE_CACHE_TTL_SECONDS if negative_ttl is None else negative_ttl
        )
        self.clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def flush(self) -> None:
        """Drop every cached entry."""
        dropped = len(self._entries)
        self._entries.clear()
        logger.info("Task type cache flushed", entries=dropped)

    async def get(self, task_type_id: str | None) -> TaskTypeConfig | None:
        """Return the active config for `task_type_id`, or None."""
        if not task_type_id:
            return None

        now = self.clock()
        cached = self._entries.get(task_type_id)
        if cached is not None and now - cached.loaded_at < self.ttl:
            return cached.config

        config = await self._load(task_type_id)
        if config is None:
            # Expires after negative_ttl rather than the full ttl
            self._entries[task_type_id] = CacheEntry(None, now - self.ttl + self.negative_ttl)
        else:
            self._entries[task_type_id] = CacheEntry(config, now)
        return config

    async def _load(self, task_type_id: str) -> TaskTypeConfig | None:
        """Registry read.  Any failure is treated as not found (fail closed)."""
        try:
            row = await self.store.get_task_type_config(task_type_id)
            if not row:
                return None
            config = TaskTypeConfig.from_mapping(row)
        except Exception as exc:
            logger.error(
                "Task type lookup failed, treating as not found",
                task_type_id=task_type_id,
                error=str(exc),
            )
            return None

        if not config.is_active:
            return None
        return config
