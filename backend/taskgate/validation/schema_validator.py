"""
Schema validation (gate 1): structure of a payload against its task type.

Checks, in one pass and without stopping at the first problem:
    - task type exists and is active (the only early return)
    - every required field is present and non-empty
    - field type / range / length / enum constraints
    - datetime_start is parsable and far enough in the future
    - budget_usd and duration_hours against the task type limits
    - unknown fields (warning only)
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from taskgate.core.config import settings
from taskgate.core.constants import ErrorCode, FieldType
from taskgate.validation.gate import ValidationGate
from taskgate.validation.types import TaskTypeConfig, ValidationResult, make_issue

# Fields every task type accepts
BASE_FIELDS = frozenset({
    "task_type", "task_type_id", "title", "location_lat", "location_lng",
    "latitude", "longitude", "is_remote", "country", "country_code",
})

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> float | None:
    """
    Lenient numeric parse: numbers pass through, strings yield their
    leading numeric prefix ("12.5 USD" -> 12.5).  Returns None when no
    number can be read.  Booleans are not numbers.  Integers too large
    for a float saturate to +/-inf so range checks still apply.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match:
            return float(match.group(0))
    return None


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO-8601 value into an aware UTC datetime, or None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def validate_schema(
    payload: Mapping[str, Any],
    config: TaskTypeConfig | None,
    *,
    now: datetime | None = None,
    min_start_lead: timedelta | None = None,
) -> ValidationResult:
    """Validate `payload` against `config`.  Returns every finding at once."""
    result = ValidationResult()
    errors, warnings = result.errors, result.warnings

    # ── Task type must exist and be active ──
    if config is None or not config.is_active:
        requested = payload.get("task_type") or payload.get("task_type_id")
        errors.append(make_issue(
            "task_type", ErrorCode.INVALID_TASK_TYPE,
            f'Task type "{requested}" not found or is inactive',
            suggestion="Use GET /api/schemas to see available task types",
        ))
        return result

    schemas = config.field_schemas
    name = config.display_name

    # ── Required fields ──
    for field in config.required_fields:
        if is_blank(payload.get(field)):
            schema = schemas.get(field)
            errors.append(make_issue(
                field, ErrorCode.MISSING_REQUIRED,
                f'"{field}" is required for {name} tasks',
                suggestion=f'Provide a value for "{field}"',
                constraint={"required_type": schema.type} if schema else None,
            ))

    # ── Per-field constraints ──
    for field, schema in schemas.items():
        value = payload.get(field)
        if is_blank(value):
            continue

        if schema.type == FieldType.NUMBER:
            number = parse_number(value)
            if number is None:
                errors.append(make_issue(
                    field, ErrorCode.INVALID_TYPE,
                    f'"{field}" must be a number, got "{type(value).__name__}"',
                    constraint={"required_type": FieldType.NUMBER.value},
                ))
                continue
            if schema.min is not None and number < schema.min:
                errors.append(make_issue(
                    field, ErrorCode.BELOW_MINIMUM,
                    f'"{field}" must be at least {schema.min}. Submitted: {_format_number(number)}',
                    constraint={"min": schema.min},
                ))
            if schema.max is not None and number > schema.max:
                errors.append(make_issue(
                    field, ErrorCode.ABOVE_MAXIMUM,
                    f'"{field}" must be at most {schema.max}. Submitted: {_format_number(number)}',
                    constraint={"max": schema.max},
                ))

        elif schema.type == FieldType.STRING:
            if not isinstance(value, str):
                errors.append(make_issue(
                    field, ErrorCode.INVALID_TYPE,
                    f'"{field}" must be a string, got "{type(value).__name__}"',
                    constraint={"required_type": FieldType.STRING.value},
                ))
                continue
            if schema.min_length is not None and len(value) < schema.min_length:
                errors.append(make_issue(
                    field, ErrorCode.STRING_TOO_SHORT,
                    f'"{field}" must be at least {schema.min_length} characters. Current: {len(value)}',
                    constraint={"min": schema.min_length},
                ))
            if schema.max_length is not None and len(value) > schema.max_length:
                errors.append(make_issue(
                    field, ErrorCode.STRING_TOO_LONG,
                    f'"{field}" must be at most {schema.max_length} characters. Current: {len(value)}',
                    constraint={"max": schema.max_length},
                ))

        elif schema.type == FieldType.ARRAY:
            if not isinstance(value, (list, tuple)):
                errors.append(make_issue(
                    field, ErrorCode.INVALID_TYPE,
                    f'"{field}" must be an array, got "{type(value).__name__}"',
                    constraint={"required_type": FieldType.ARRAY.value},
                ))
                continue
            if schema.min_items is not None and len(value) < schema.min_items:
                errors.append(make_issue(
                    field, ErrorCode.ARRAY_TOO_FEW,
                    f'"{field}" must have at least {schema.min_items} item(s). Current: {len(value)}',
                    constraint={"min": schema.min_items},
                ))
            if schema.allowed_values is not None:
                invalid = [item for item in value if item not in schema.allowed_values]
                if invalid:
                    allowed = list(schema.allowed_values)
                    errors.append(make_issue(
                        field, ErrorCode.INVALID_VALUE,
                        f'"{field}" contains invalid values: {", ".join(map(str, invalid))}',
                        suggestion=f'Allowed values: {", ".join(map(str, allowed))}',
                        constraint={"allowed_values": allowed},
                    ))

    # ── datetime_start ──
    raw_start = payload.get("datetime_start")
    if raw_start:
        start = parse_datetime(raw_start)
        if start is None:
            errors.append(make_issue(
                "datetime_start", ErrorCode.INVALID_DATETIME,
                "datetime_start is not a valid date/time string",
                suggestion='Use ISO 8601 format, e.g. "2025-03-15T14:00:00Z"',
            ))
        else:
            lead = min_start_lead or timedelta(minutes=settings.MIN_START_LEAD_MINUTES)
            earliest = (now or datetime.now(timezone.utc)) + lead
            if start < earliest:
                minutes = int(lead.total_seconds() // 60)
                errors.append(make_issue(
                    "datetime_start", ErrorCode.INVALID_DATETIME,
                    f"datetime_start must be at least {minutes} minutes in the future",
                    suggestion=f"Set datetime_start to a future date/time, at least {minutes} minutes from now",
                    constraint={"min_lead_minutes": minutes},
                ))

    # ── Budget floor ──
    budget = parse_number(payload.get("budget_usd"))
    if budget is not None and config.minimum_budget_usd and budget < config.minimum_budget_usd:
        errors.append(make_issue(
            "budget_usd", ErrorCode.BUDGET_BELOW_MINIMUM,
            f"Minimum budget for {name} tasks is ${_format_number(config.minimum_budget_usd)}. "
            f"Submitted: ${_format_number(budget)}",
            constraint={"min": config.minimum_budget_usd},
        ))

    # ── Duration ceiling ──
    duration = parse_number(payload.get("duration_hours"))
    if duration is not None and config.maximum_duration_hr and duration > config.maximum_duration_hr:
        errors.append(make_issue(
            "duration_hours", ErrorCode.DURATION_EXCEEDS_MAX,
            f"Maximum duration for {name} tasks is {_format_number(config.maximum_duration_hr)} hours. "
            f"Submitted: {_format_number(duration)}",
            constraint={"max": config.maximum_duration_hr},
        ))

    # ── Unknown fields ──
    known = BASE_FIELDS.union(config.required_fields, config.optional_fields)
    for field in payload:
        if field not in known:
            warnings.append(make_issue(
                field, ErrorCode.UNKNOWN_FIELD,
                f'Unknown field "{field}" is not defined for {name} tasks',
                suggestion=f"Check GET /api/schemas/{config.id} for valid fields",
            ))

    return result


class SchemaGate(ValidationGate):
    """Gate wrapper around validate_schema()."""

    name = "schema"
    description = "Required fields, types, ranges, datetime and limits"

    def check(self, payload, config, **context) -> ValidationResult:
        return validate_schema(payload, config, now=context.get("now"))
