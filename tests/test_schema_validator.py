from __future__ import annotations

import json
from datetime import timedelta

from conftest import CLEANING_CONFIG, FIXED_NOW, valid_cleaning_payload

from taskgate.core.constants import ErrorCode
from taskgate.validation.schema_validator import parse_datetime, parse_number, validate_schema
from taskgate.validation.types import TaskTypeConfig


def _codes(issues) -> list[str]:
    return [issue.code for issue in issues]


def test_valid_payload_passes(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(), cleaning_config, now=FIXED_NOW)

    assert result.valid
    assert result.errors == []
    assert result.warnings == []


def test_missing_config_is_single_invalid_task_type_error() -> None:
    result = validate_schema({"task_type": "nonexistent", "title": "x"}, None, now=FIXED_NOW)

    assert _codes(result.errors) == [ErrorCode.INVALID_TASK_TYPE]
    assert '"nonexistent"' in result.errors[0].message


def test_inactive_config_is_invalid_task_type() -> None:
    config = TaskTypeConfig.from_mapping({**CLEANING_CONFIG, "is_active": False})

    result = validate_schema(valid_cleaning_payload(), config, now=FIXED_NOW)

    assert _codes(result.errors) == [ErrorCode.INVALID_TASK_TYPE]


def test_all_missing_required_fields_reported_together(cleaning_config) -> None:
    result = validate_schema({"task_type": "cleaning"}, cleaning_config, now=FIXED_NOW)

    missing = {e.field for e in result.errors if e.code == ErrorCode.MISSING_REQUIRED}
    assert missing == set(CLEANING_CONFIG["required_fields"])


def test_empty_string_and_none_count_as_missing(cleaning_config) -> None:
    payload = valid_cleaning_payload(title="", location_zone=None)

    result = validate_schema(payload, cleaning_config, now=FIXED_NOW)

    missing = {e.field for e in result.errors if e.code == ErrorCode.MISSING_REQUIRED}
    assert missing == {"title", "location_zone"}


def test_missing_required_carries_required_type(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(budget_usd=None), cleaning_config, now=FIXED_NOW)

    error = next(e for e in result.errors if e.field == "budget_usd")
    assert error.constraint == {"required_type": "number"}


def test_non_numeric_value_is_invalid_type_and_skips_range(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(duration_hours="lots"), cleaning_config, now=FIXED_NOW)

    duration_codes = [e.code for e in result.errors if e.field == "duration_hours"]
    assert duration_codes == [ErrorCode.INVALID_TYPE]


def test_numeric_string_is_parsed(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(duration_hours="3"), cleaning_config, now=FIXED_NOW)

    assert result.valid


def test_number_range_errors_carry_constraints(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(duration_hours=0.5), cleaning_config, now=FIXED_NOW)

    error = next(e for e in result.errors if e.code == ErrorCode.BELOW_MINIMUM)
    assert error.field == "duration_hours"
    assert error.constraint == {"min": 1}


def test_above_maximum_and_duration_exceeds_max(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(duration_hours=13), cleaning_config, now=FIXED_NOW)

    codes = _codes(result.errors)
    assert ErrorCode.ABOVE_MAXIMUM in codes
    assert ErrorCode.DURATION_EXCEEDS_MAX in codes


def test_string_length_bounds(cleaning_config) -> None:
    result = validate_schema(
        valid_cleaning_payload(title="Hi", description="x" * 1001),
        cleaning_config,
        now=FIXED_NOW,
    )

    by_field = {e.field: e for e in result.errors}
    assert by_field["title"].code == ErrorCode.STRING_TOO_SHORT
    assert by_field["title"].constraint == {"min": 5}
    assert by_field["description"].code == ErrorCode.STRING_TOO_LONG
    assert by_field["description"].constraint == {"max": 1000}


def test_non_string_title_is_invalid_type(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(title=12345), cleaning_config, now=FIXED_NOW)

    assert [e.code for e in result.errors if e.field == "title"] == [ErrorCode.INVALID_TYPE]


def test_array_invalid_values_reported_once_naming_all(cleaning_config) -> None:
    payload = valid_cleaning_payload(skills_required=["standard_clean", "plumbing", "roofing"])

    result = validate_schema(payload, cleaning_config, now=FIXED_NOW)

    errors = [e for e in result.errors if e.code == ErrorCode.INVALID_VALUE]
    assert len(errors) == 1
    assert "plumbing" in errors[0].message
    assert "roofing" in errors[0].message
    assert "standard_clean" in errors[0].constraint["allowed_values"]


def test_array_expected_but_string_given(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(skills_required="deep_clean"), cleaning_config, now=FIXED_NOW)

    assert [e.code for e in result.errors if e.field == "skills_required"] == [ErrorCode.INVALID_TYPE]


def test_array_too_few() -> None:
    config = TaskTypeConfig.from_mapping({
        **CLEANING_CONFIG,
        "field_schemas": {"skills_required": {"type": "array", "min_items": 1}},
    })

    result = validate_schema(valid_cleaning_payload(skills_required=[]), config, now=FIXED_NOW)

    assert _codes(result.errors) == [ErrorCode.ARRAY_TOO_FEW]


def test_datetime_thirty_minutes_ahead_fails(cleaning_config) -> None:
    start = (FIXED_NOW + timedelta(minutes=30)).isoformat()

    result = validate_schema(valid_cleaning_payload(datetime_start=start), cleaning_config, now=FIXED_NOW)

    error = next(e for e in result.errors if e.field == "datetime_start")
    assert error.code == ErrorCode.INVALID_DATETIME
    assert "60 minutes in the future" in error.message


def test_datetime_two_hours_ahead_passes(cleaning_config) -> None:
    start = (FIXED_NOW + timedelta(hours=2)).isoformat()

    result = validate_schema(valid_cleaning_payload(datetime_start=start), cleaning_config, now=FIXED_NOW)

    assert result.valid


def test_unparsable_datetime_fails(cleaning_config) -> None:
    result = validate_schema(
        valid_cleaning_payload(datetime_start="next tuesday-ish"),
        cleaning_config,
        now=FIXED_NOW,
    )

    error = next(e for e in result.errors if e.field == "datetime_start")
    assert error.code == ErrorCode.INVALID_DATETIME
    assert "not a valid date" in error.message


def test_budget_exactly_minimum_is_valid(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(budget_usd=15), cleaning_config, now=FIXED_NOW)

    assert result.valid


def test_budget_one_cent_below_minimum_fails(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(budget_usd=14.99), cleaning_config, now=FIXED_NOW)

    assert ErrorCode.BUDGET_BELOW_MINIMUM in _codes(result.errors)


def test_unknown_field_is_only_a_warning(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(favourite_colour="teal"), cleaning_config, now=FIXED_NOW)

    assert result.valid
    assert _codes(result.warnings) == [ErrorCode.UNKNOWN_FIELD]
    assert result.warnings[0].field == "favourite_colour"


def test_base_and_private_fields_are_known(cleaning_config) -> None:
    payload = valid_cleaning_payload(
        location_lat=10.78,
        location_lng=106.75,
        country_code="VN",
        private_address="123 Nguyen Hue",
    )

    result = validate_schema(payload, cleaning_config, now=FIXED_NOW)

    assert result.warnings == []


def test_parse_number_is_lenient_but_rejects_bools() -> None:
    assert parse_number(12) == 12.0
    assert parse_number("12.5 USD") == 12.5
    assert parse_number("  -3") == -3.0
    assert parse_number("abc") is None
    assert parse_number(True) is None
    assert parse_number(None) is None


def test_parse_datetime_treats_naive_as_utc() -> None:
    parsed = parse_datetime("2026-01-16T10:00:00")

    assert parsed is not None
    assert parsed.utcoffset() == timedelta(0)
    assert parse_datetime("2026-01-16T10:00:00Z") == parsed


def test_parse_number_saturates_oversized_ints() -> None:
    assert parse_number(10**400) == float("inf")
    assert parse_number(-(10**400)) == float("-inf")


def test_oversized_duration_still_hits_the_ceiling(cleaning_config) -> None:
    result = validate_schema(valid_cleaning_payload(duration_hours=10**400), cleaning_config, now=FIXED_NOW)

    codes = _codes(result.errors)
    assert ErrorCode.ABOVE_MAXIMUM in codes
    assert ErrorCode.DURATION_EXCEEDS_MAX in codes


def test_oversized_budget_keeps_other_findings(cleaning_config) -> None:
    payload = json.loads('{"task_type": "cleaning", "title": "Clean", "budget_usd": 1' + "0" * 400 + "}")

    result = validate_schema(payload, cleaning_config, now=FIXED_NOW)

    missing = {e.field for e in result.errors if e.code == ErrorCode.MISSING_REQUIRED}
    assert missing == {"description", "datetime_start", "duration_hours", "location_zone"}
