from __future__ import annotations

from taskgate.core.constants import ErrorCode
from taskgate.validation.budget_validator import validate_budget


def _codes(issues) -> list[str]:
    return [issue.code for issue in issues]


def test_low_implied_rate_fails() -> None:
    result = validate_budget({"budget_usd": 8, "duration_hours": 4})

    assert _codes(result.errors) == [ErrorCode.BELOW_MINIMUM]
    error = result.errors[0]
    assert "$2.00/hr" in error.message
    assert error.suggestion == "Increase budget to at least $20.00 for 4 hours of work"
    assert error.constraint == {"min": 5.0}


def test_fair_rate_passes() -> None:
    result = validate_budget({"budget_usd": 30, "duration_hours": 3})

    assert result.valid
    assert result.warnings == []


def test_high_rate_is_warning_only() -> None:
    result = validate_budget({"budget_usd": 5000, "duration_hours": 1})

    assert result.valid
    assert _codes(result.warnings) == [ErrorCode.HIGH_BUDGET_WARNING]


def test_rate_exactly_at_floor_passes() -> None:
    result = validate_budget({"budget_usd": 20, "duration_hours": 4})

    assert result.valid


def test_budget_below_task_type_minimum(cleaning_config) -> None:
    result = validate_budget({"budget_usd": 14.99}, cleaning_config)

    assert _codes(result.errors) == [ErrorCode.BUDGET_BELOW_MINIMUM]
    assert result.errors[0].constraint == {"min": 15.0}


def test_budget_equal_to_minimum_passes(cleaning_config) -> None:
    result = validate_budget({"budget_usd": 15}, cleaning_config)

    assert result.valid


def test_missing_or_zero_duration_skips_rate_check() -> None:
    assert validate_budget({"budget_usd": 1}).valid
    assert validate_budget({"budget_usd": 1, "duration_hours": 0}).valid


def test_non_numeric_budget_is_left_to_schema_gate() -> None:
    result = validate_budget({"budget_usd": "cheap", "duration_hours": 2})

    assert result.valid


def test_thresholds_are_overridable() -> None:
    result = validate_budget(
        {"budget_usd": 40, "duration_hours": 4},
        min_hourly_rate=15,
        high_rate_threshold=9,
    )

    assert _codes(result.errors) == [ErrorCode.BELOW_MINIMUM]
    assert _codes(result.warnings) == [ErrorCode.HIGH_BUDGET_WARNING]


def test_oversized_duration_fails_the_rate_floor() -> None:
    result = validate_budget({"budget_usd": 35, "duration_hours": 10**400})

    assert _codes(result.errors) == [ErrorCode.BELOW_MINIMUM]


def test_oversized_budget_is_a_high_rate_warning() -> None:
    result = validate_budget({"budget_usd": 10**400, "duration_hours": 2})

    assert result.valid
    assert _codes(result.warnings) == [ErrorCode.HIGH_BUDGET_WARNING]
