"""
ValidationGate: abstract base class for every validation gate.

A gate is an independent, synchronous, stateless check over
(payload, config).  The pipeline calls check() on every gate and never
lets one gate's outcome stop the others.  Gates only implement the rule
logic; timing, logging and containment live in the pipeline.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from taskgate.validation.types import TaskTypeConfig, ValidationResult


class ValidationGate(ABC):
    """
    Base class for every gate.

    Subclasses MUST implement:
        - name (str)          unique identifier, e.g. "schema"
        - description (str)   human-readable label for logs
        - check(payload, config, **context)
    """

    name: str = "unnamed_gate"
    description: str = "No description"

    @abstractmethod
    def check(
        self,
        payload: Mapping[str, Any],
        config: TaskTypeConfig | None,
        **context: Any,
    ) -> ValidationResult:
        """
        Run the gate's rules.  Must return a ValidationResult.

        `context` carries call-scoped values such as `now`; gates ignore
        keys they do not use.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name}>"
