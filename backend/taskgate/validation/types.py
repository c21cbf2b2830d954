"""
Validation value types.

ValidationIssue is the structured finding every gate emits.  All fields
are designed so a calling agent can self-correct from the issue alone:
`constraint` carries the violated bound, `suggestion` the fix, and
`detected` a masked excerpt (never raw PII).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from taskgate.core.constants import FieldType


# ═══════════════════════════════════════════════════════════
#  Findings
# ═══════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ValidationIssue:
    """One error or warning produced by a gate."""

    field: str
    code: str
    message: str
    suggestion: str | None = None
    detected: str | None = None
    constraint: Mapping[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise for JSON responses / JSONB storage (absent extras omitted)."""
        data: dict[str, Any] = {
            "field": self.field,
            "code": str(self.code),
            "message": self.message,
        }
        if self.suggestion:
            data["suggestion"] = self.suggestion
        if self.detected:
            data["detected"] = self.detected
        if self.constraint:
            data["constraint"] = dict(self.constraint)
        return data


def make_issue(
    field: str,
    code: str,
    message: str,
    *,
    suggestion: str | None = None,
    detected: str | None = None,
    constraint: Mapping[str, Any] | None = None,
) -> ValidationIssue:
    """Build a ValidationIssue; the constraint is frozen into a read-only view."""
    return ValidationIssue(
        field=field,
        code=code,
        message=message,
        suggestion=suggestion,
        detected=detected,
        constraint=MappingProxyType(dict(constraint)) if constraint else None,
    )


@dataclass
class ValidationResult:
    """Errors and warnings from one gate, or the aggregate of all gates."""

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)
    flagged: bool = False
    task_type_schema_url: str | None = None

    @property
    def valid(self) -> bool:
        return not self.errors

    def has_code(self, code: str) -> bool:
        return any(issue.code == code for issue in self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
            "flagged": self.flagged,
            "task_type_schema_url": self.task_type_schema_url,
        }


# ═══════════════════════════════════════════════════════════
#  Task type configuration
# ═══════════════════════════════════════════════════════════

@dataclass(frozen=True)
class FieldSchema:
    """Declared constraints for one payload field."""

    type: str
    min: float | None = None
    max: float | None = None
    min_length: int | None = None
    max_length: int | None = None
    min_items: int | None = None
    allowed_values: tuple[Any, ...] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FieldSchema":
        allowed = data.get("allowed_values")
        return cls(
            type=str(data.get("type", FieldType.STRING)),
            min=data.get("min"),
            max=data.get("max"),
            min_length=data.get("min_length"),
            max_length=data.get("max_length"),
            min_items=data.get("min_items"),
            allowed_values=tuple(allowed) if allowed is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type}
        for key in ("min", "max", "min_length", "max_length", "min_items"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.allowed_values is not None:
            data["allowed_values"] = list(self.allowed_values)
        return data


@dataclass(frozen=True)
class TaskTypeConfig:
    """
    Immutable snapshot of one task-type registry row.

    Args:
        id: Registry key, e.g. "cleaning".
        required_fields: Ordered field names that must be present.
        optional_fields: Field names accepted without a warning.
        field_schemas: Per-field type/range constraints.
        minimum_budget_usd: Absolute budget floor for this type.
        maximum_duration_hr: Duration ceiling for this type.
        prohibited_keywords: Extra hard-block terms scoped to this type.
    """

    id: str
    display_name: str
    description: str = ""
    category: str = ""
    required_fields: tuple[str, ...] = ()
    optional_fields: tuple[str, ...] = ()
    field_schemas: Mapping[str, FieldSchema] = field(default_factory=dict)
    minimum_budget_usd: float | None = None
    maximum_duration_hr: float | None = None
    prohibited_keywords: tuple[str, ...] = ()
    requires_address: bool = False
    is_active: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TaskTypeConfig":
        """Build a config from a registry row (dict, JSON, or ORM-to-dict)."""
        schemas = data.get("field_schemas") or {}
        return cls(
            id=str(data["id"]),
            display_name=data.get("display_name") or str(data["id"]),
            description=data.get("description") or "",
            category=data.get("category") or "",
            required_fields=tuple(data.get("required_fields") or ()),
            optional_fields=tuple(data.get("optional_fields") or ()),
            field_schemas=MappingProxyType({
                name: FieldSchema.from_mapping(schema)
                for name, schema in schemas.items()
            }),
            minimum_budget_usd=_optional_float(data.get("minimum_budget_usd")),
            maximum_duration_hr=_optional_float(data.get("maximum_duration_hr")),
            prohibited_keywords=tuple(data.get("prohibited_keywords") or ()),
            requires_address=bool(data.get("requires_address", False)),
            is_active=bool(data.get("is_active", True)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "display_name": self.display_name,
            "description": self.description,
            "category": self.category,
            "required_fields": list(self.required_fields),
            "optional_fields": list(self.optional_fields),
            "field_schemas": {
                name: schema.to_dict() for name, schema in self.field_schemas.items()
            },
            "minimum_budget_usd": self.minimum_budget_usd,
            "maximum_duration_hr": self.maximum_duration_hr,
            "prohibited_keywords": list(self.prohibited_keywords),
            "requires_address": self.requires_address,
            "is_active": self.is_active,
        }


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)
