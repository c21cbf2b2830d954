"""
Budget validation (gate 4): economics of the offered budget.

    - budget >= task type minimum_budget_usd (mirrors the schema gate so the
      check still fires for configs without field schemas)
    - implied hourly rate >= minimum wage floor (default $5/hr)
    - implied hourly rate above $500/hr is a warning, never a rejection
"""

from __future__ import annotations

from typing import Any, Mapping

from taskgate.core.config import settings
from taskgate.core.constants import ErrorCode
from taskgate.validation.gate import ValidationGate
from taskgate.validation.schema_validator import parse_number
from taskgate.validation.types import TaskTypeConfig, ValidationResult, make_issue


def _money(value: float) -> str:
    return f"{value:.2f}"


def validate_budget(
    payload: Mapping[str, Any],
    config: TaskTypeConfig | None = None,
    *,
    min_hourly_rate: float | None = None,
    high_rate_threshold: float | None = None,
) -> ValidationResult:
    """Judge a numeric budget; presence and type belong to the schema gate."""
    result = ValidationResult()
    floor = settings.MIN_HOURLY_RATE_USD if min_hourly_rate is None else min_hourly_rate
    ceiling = settings.HIGH_HOURLY_RATE_USD if high_rate_threshold is None else high_rate_threshold

    budget = parse_number(payload.get("budget_usd"))
    if budget is None:
        return result

    if config is not None and config.minimum_budget_usd and budget < config.minimum_budget_usd:
        result.errors.append(make_issue(
            "budget_usd", ErrorCode.BUDGET_BELOW_MINIMUM,
            f"Minimum budget for {config.display_name} tasks is ${config.minimum_budget_usd:g}. "
            f"Submitted: ${budget:g}",
            constraint={"min": config.minimum_budget_usd},
        ))

    duration = parse_number(payload.get("duration_hours"))
    if duration is None or duration <= 0:
        return result

    rate = budget / duration

    if rate < floor:
        result.errors.append(make_issue(
            "budget_usd", ErrorCode.BELOW_MINIMUM,
            f"Implied hourly rate is ${_money(rate)}/hr (budget ${budget:g} / {duration:g}hr). "
            f"Minimum is ${floor:g}/hr.",
            suggestion=f"Increase budget to at least ${_money(round(floor * duration, 2))} "
                       f"for {duration:g} hours of work",
            constraint={"min": floor},
        ))

    if rate > ceiling:
        result.warnings.append(make_issue(
            "budget_usd", ErrorCode.HIGH_BUDGET_WARNING,
            f"Implied hourly rate is ${_money(rate)}/hr, which is unusually high. "
            "Please confirm this is intentional.",
            suggestion="Double-check the budget and duration values",
        ))

    return result


class BudgetGate(ValidationGate):
    """Gate wrapper around validate_budget()."""

    name = "budget"
    description = "Budget floor and implied hourly rate"

    def check(self, payload, config, **context) -> ValidationResult:
        return validate_budget(payload, config)
