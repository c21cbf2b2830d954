#!/usr/bin/env python3
"""
Demo script: run the validation pipeline locally without Postgres.

Uses the built-in task types in an in-memory store and shows a clean
payload, a payload with several problems at once, a flagged payload,
and the consecutive-failure lockout.

Usage:
    cd backend
    python -m scripts.demo_validation
"""

import asyncio
from datetime import datetime, timedelta, timezone


def _cleaning_payload(**overrides):
    start = datetime.now(timezone.utc) + timedelta(days=1)
    payload = {
        "task_type": "cleaning",
        "title": "2BR Apartment Standard Clean",
        "description": "Standard cleaning for a 2-bedroom apartment, kitchen and bathrooms included.",
        "location_zone": "District 2, Thu Duc",
        "datetime_start": start.isoformat(),
        "duration_hours": 2,
        "budget_usd": 35,
        "private_address": "123 Nguyen Hue, Apartment 4B, District 2",
    }
    payload.update(overrides)
    return payload


def _print_result(label, result):
    """Pretty-print a ValidationResult."""
    print(f"\n{'─' * 50}")
    print(f"  {label}")
    print(f"  Valid    : {result.valid}")
    print(f"  Flagged  : {result.flagged}")
    for issue in result.errors:
        print(f"    ✗ {issue.field}: {issue.code} - {issue.message}")
        if issue.suggestion:
            print(f"        → {issue.suggestion}")
    for issue in result.warnings:
        print(f"    ⚠ {issue.field}: {issue.code} - {issue.message}")
    print(f"{'─' * 50}")


async def main():
    from taskgate.core.logging import setup_logging
    from taskgate.db.seed_data import BUILTIN_TASK_TYPES
    from taskgate.validation.memory_store import InMemoryTaskStore
    from taskgate.validation.pipeline import ValidationPipeline

    setup_logging("WARNING")     # quiet logs, show formatted output only

    pipeline = ValidationPipeline(InMemoryTaskStore(BUILTIN_TASK_TYPES))

    print("\n╔" + "═" * 48 + "╗")
    print("║        TASK VALIDATION PIPELINE - DEMO         ║")
    print("╚" + "═" * 48 + "╝")

    result = await pipeline.validate_task(_cleaning_payload(), dry_run=True, agent_id="demo-agent")
    _print_result("DEMO 1: clean payload", result)

    result = await pipeline.validate_task(
        _cleaning_payload(
            description="Call me at 555-123-4567, buying cocaine for the party",
            budget_usd=5,
            duration_hours=None,
        ),
        dry_run=True,
        agent_id="demo-agent",
    )
    _print_result("DEMO 2: many problems, reported together", result)

    result = await pipeline.validate_task(
        _cleaning_payload(description="Deep clean the kitchen and sharpen the knife set afterwards"),
        dry_run=True,
        agent_id="demo-agent",
    )
    _print_result("DEMO 3: flagged for manual review", result)

    for _ in range(pipeline.tracker.max_consecutive_failures):
        await pipeline.validate_task(_cleaning_payload(budget_usd=1), agent_id="demo-agent")
    result = await pipeline.validate_task(_cleaning_payload(), agent_id="demo-agent")
    _print_result("DEMO 4: locked out after consecutive failures", result)

    print("\n✅ Demo completed.\n")


if __name__ == "__main__":
    asyncio.run(main())
