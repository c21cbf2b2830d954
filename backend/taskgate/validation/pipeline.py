"""
ValidationPipeline: runs every gate over a task payload.

Responsibilities:
    - Refuse agents locked out by consecutive failures
    - Load the task type config through the TTL cache
    - Run ALL gates (no short-circuit across gates), each contained so a
      bug in one gate degrades to "no finding" for that gate
    - Aggregate errors / warnings in gate order
    - Track consecutive failures per agent
    - Write one audit record per call (best-effort)
"""

from __future__ import annotations

import hashlib
import json
import time
from datetime import datetime
from typing import Any, Callable, Mapping, Sequence

import structlog

from taskgate.core.config import settings
from taskgate.core.constants import ErrorCode, ValidationOutcome
from taskgate.validation.budget_validator import BudgetGate
from taskgate.validation.cache import TaskTypeConfigCache, utcnow
from taskgate.validation.content_policy import ContentPolicyGate
from taskgate.validation.failure_tracker import FailureTracker
from taskgate.validation.gate import ValidationGate
from taskgate.validation.pii_scanner import PIIGate
from taskgate.validation.schema_validator import SchemaGate
from taskgate.validation.store import TaskStore, ValidationLogRecord
from taskgate.validation.types import ValidationResult, make_issue


def hash_payload(payload: Mapping[str, Any]) -> str:
    """SHA-256 hex digest of the payload serialised with sorted keys."""
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def schema_url(task_type_id: str | None) -> str | None:
    if not task_type_id:
        return None
    return f"{settings.SCHEMA_URL_PREFIX}/{task_type_id}"


def default_gates() -> list[ValidationGate]:
    """The four gates in aggregation order."""
    return [SchemaGate(), PIIGate(), ContentPolicyGate(), BudgetGate()]


class ValidationPipeline:
    """
    Validates task payloads against the task type registry.

    Usage::

        pipeline = ValidationPipeline(SqlTaskStore(async_session_factory))
        result = await pipeline.validate_task(payload, dry_run=True, agent_id="agent-1")
        if not result.valid:
            ...

    The cache and the failure tracker are per instance; build one
    pipeline per process and share it.
    """

    def __init__(
        self,
        store: TaskStore,
        *,
        clock: Callable[[], datetime] = utcnow,
        gates: Sequence[ValidationGate] | None = None,
        cache: TaskTypeConfigCache | None = None,
        tracker: FailureTracker | None = None,
    ) -> None:
        self.store = store
        self.clock = clock
        self.gates = list(gates) if gates is not None else default_gates()
        self.cache = cache or TaskTypeConfigCache(store, clock=clock)
        self.tracker = tracker or FailureTracker()
        self.logger = structlog.get_logger("validation.pipeline")

    # ── Admin controls ────────────────────────────────

    def flush_task_type_cache(self) -> None:
        self.cache.flush()

    def reset_failures(self, agent_id: str | None) -> bool:
        """Out-of-band unlock.  Returns True if the agent had a tracker entry."""
        existed = self.tracker.reset(agent_id)
        self.logger.info("Failure counter reset", agent_id=agent_id, existed=existed)
        return existed

    # ── Main entry point ──────────────────────────────

    async def validate_task(
        self,
        payload: Mapping[str, Any],
        *,
        dry_run: bool = False,
        agent_id: str | None = None,
    ) -> ValidationResult:
        """
        Run the full pipeline over one payload.

        Args:
            payload: The task creation body.
            dry_run: True for validate-only calls; recorded in the audit log.
            agent_id: Calling agent; the failure tracker key.
        """
        task_type_id = payload.get("task_type") or payload.get("task_type_id")
        payload_hash = hash_payload(payload)

        log = self.logger.bind(
            agent_id=agent_id,
            task_type_id=task_type_id,
            dry_run=dry_run,
        )

        # ── Rate limit ────────────────────────────────
        if self.tracker.is_locked(agent_id):
            log.warning(
                "Agent locked out by consecutive failures",
                failures=self.tracker.count(agent_id),
            )
            return self._rate_limited(task_type_id)

        # ── Load config ───────────────────────────────
        config = await self.cache.get(task_type_id)

        # ── Run gates ─────────────────────────────────
        now = self.clock()
        result = ValidationResult(task_type_schema_url=schema_url(task_type_id))

        for gate in self.gates:
            gate_result = self._run_gate(gate, payload, config, log, now=now)
            result.errors.extend(gate_result.errors)
            result.warnings.extend(gate_result.warnings)
            result.flagged = result.flagged or gate_result.flagged

        # ── Track failures ────────────────────────────
        if result.valid:
            self.tracker.reset(agent_id)
            attempt_number = 1
        else:
            attempt_number = self.tracker.record_failure(agent_id, payload_hash)

        if not result.valid:
            outcome = ValidationOutcome.FAILED
        elif result.flagged:
            outcome = ValidationOutcome.FLAGGED_FOR_REVIEW
        else:
            outcome = ValidationOutcome.PASSED

        log.info(
            "Validation finished",
            outcome=str(outcome),
            error_count=len(result.errors),
            warning_count=len(result.warnings),
            attempt_number=attempt_number,
        )

        # ── Audit ─────────────────────────────────────
        policy_flags = [
            w.to_dict() for w in result.warnings if w.code == ErrorCode.PROHIBITED_CONTENT
        ] if result.flagged else []

        await self._write_audit(
            ValidationLogRecord(
                agent_id=agent_id,
                task_type_id=task_type_id,
                payload_hash=payload_hash,
                validation_result=str(outcome),
                errors=[e.to_dict() for e in result.errors],
                policy_flags=policy_flags,
                attempt_number=attempt_number,
                dry_run=dry_run,
                created_at=now,
            ),
            log,
        )

        return result

    # ── Internals ─────────────────────────────────────

    def _run_gate(self, gate, payload, config, log, **context) -> ValidationResult:
        """Run one gate; an unexpected exception becomes an empty result."""
        gate_log = log.bind(gate=gate.name)
        t0 = time.monotonic()
        try:
            gate_result = gate.check(payload, config, **context)
        except Exception as exc:
            gate_log.exception("Unexpected error in gate", error=str(exc))
            return ValidationResult()

        gate_log.debug(
            "Gate finished",
            errors=len(gate_result.errors),
            warnings=len(gate_result.warnings),
            duration_ms=int((time.monotonic() - t0) * 1000),
        )
        return gate_result

    async def _write_audit(self, record: ValidationLogRecord, log) -> None:
        try:
            await self.store.insert_audit_record(record)
        except Exception as exc:
            log.error("Failed to write validation audit record", error=str(exc))

    def _rate_limited(self, task_type_id: str | None) -> ValidationResult:
        limit = self.tracker.max_consecutive_failures
        return ValidationResult(
            errors=[make_issue(
                "_request", ErrorCode.RATE_LIMIT_EXCEEDED,
                f"{limit} consecutive validation failures. Please review the errors from "
                "previous attempts or escalate to a human user for clarification.",
                suggestion=f"Use GET {settings.SCHEMA_URL_PREFIX}/{task_type_id or ''} to review "
                           "the task type requirements, then fix all errors before retrying.",
            )],
            task_type_schema_url=schema_url(task_type_id),
        )


# ═══════════════════════════════════════════════════════════
#  Process-wide default pipeline
# ═══════════════════════════════════════════════════════════

_default_pipeline: ValidationPipeline | None = None


def get_default_pipeline(store: TaskStore) -> ValidationPipeline:
    """Return the shared pipeline, pointing it at `store`."""
    global _default_pipeline
    if _default_pipeline is None:
        _default_pipeline = ValidationPipeline(store)
    else:
        _default_pipeline.store = store
        _default_pipeline.cache.store = store
    return _default_pipeline


async def validate_task(
    store: TaskStore,
    payload: Mapping[str, Any],
    *,
    dry_run: bool = False,
    agent_id: str | None = None,
) -> ValidationResult:
    """Validate with the process-wide default pipeline."""
    pipeline = get_default_pipeline(store)
    return await pipeline.validate_task(payload, dry_run=dry_run, agent_id=agent_id)


def flush_task_type_cache() -> None:
    if _default_pipeline is not None:
        _default_pipeline.flush_task_type_cache()
