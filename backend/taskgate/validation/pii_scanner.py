"""
PII scanner (gate 2): personal information in public-facing fields.

PII in a public field is a hard rejection (errors, not warnings).
Private fields are never scanned here.
"""

from __future__ import annotations

from typing import Any, Mapping

from taskgate.core.constants import ErrorCode
from taskgate.privacy.pii_patterns import PII_PATTERNS, PUBLIC_FIELDS_TO_SCAN
from taskgate.validation.gate import ValidationGate
from taskgate.validation.types import TaskTypeConfig, ValidationResult, make_issue


def _field_text(value: Any) -> str | None:
    if isinstance(value, (list, tuple)):
        value = " ".join(str(item) for item in value)
    if isinstance(value, str) and value:
        return value
    return None


def scan_for_pii(
    payload: Mapping[str, Any],
    config: TaskTypeConfig | None = None,
) -> ValidationResult:
    """Report the first genuine match of every pattern in every public field."""
    result = ValidationResult()

    for field in PUBLIC_FIELDS_TO_SCAN:
        text = _field_text(payload.get(field))
        if text is None:
            continue

        for pattern in PII_PATTERNS:
            for match in pattern.regex.finditer(text):
                matched = match.group(0)
                if not pattern.is_genuine(matched, text):
                    continue

                result.errors.append(make_issue(
                    field, ErrorCode.PII_DETECTED,
                    f"{field} contains what appears to be a {pattern.label}. "
                    "Remove PII from public fields.",
                    detected=pattern.masked(matched),
                    suggestion=pattern.suggestion,
                ))
                # One report per pattern per field
                break

    return result


class PIIGate(ValidationGate):
    """Gate wrapper around scan_for_pii()."""

    name = "pii"
    description = "Personal information in public fields"

    def check(self, payload, config, **context) -> ValidationResult:
        return scan_for_pii(payload, config)
