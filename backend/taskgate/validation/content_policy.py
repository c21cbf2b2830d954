"""
Content policy scanner (gate 3): prohibited and borderline content.

Two keyword tiers, both matched on word boundaries and case-insensitively
("therapist" never matches "rapist"):

    PROHIBITED_KEYWORDS  hard block: PROHIBITED_CONTENT error, task rejected
    FLAGGED_KEYWORDS     soft flag: PROHIBITED_CONTENT warning and
                         flagged=True, task routed to manual review

A task type's own prohibited_keywords act as an extra hard-block list
scoped to that type.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Iterable, Mapping

from taskgate.core.constants import ErrorCode
from taskgate.validation.gate import ValidationGate
from taskgate.validation.types import TaskTypeConfig, ValidationResult, make_issue

# Unambiguously illegal or harmful; no plausible legitimate task reading.
PROHIBITED_KEYWORDS: tuple[str, ...] = (
    # Controlled substances
    "cocaine", "heroin", "methamphetamine", "meth", "fentanyl", "ecstasy", "mdma",
    "lsd", "crack cocaine", "opium", "ketamine", "pcp", "drug dealer", "drug dealing",
    "marijuana delivery", "weed delivery", "drug mule", "drug smuggling",

    # Weapons
    "firearm", "gun purchase", "buy a gun", "sell a gun", "ammunition", "explosive",
    "bomb making", "weapon manufacturing", "silencer", "suppressor",

    # Fraud / identity documents
    "fake id", "fake passport", "fake license", "counterfeit", "forged document",
    "identity theft", "credit card fraud", "money laundering", "wire fraud",
    "ponzi scheme", "pyramid scheme", "phishing",

    # Harassment / stalking / extortion
    "stalk someone", "follow someone", "spy on", "surveillance of", "track someone",
    "intimidate", "threaten", "blackmail", "extort", "harass",
    "revenge porn", "doxing", "doxxing",

    # Commercial sexual services
    "escort service", "sexual services", "sex work", "prostitution",
    "adult massage", "happy ending", "sugar daddy", "sugar baby",

    # Illegal gambling operations
    "illegal gambling", "gambling operation", "underground casino",
    "sports betting operation", "bookmaking",

    # Violence / animal cruelty
    "poison someone", "hurt someone", "assault", "kidnap", "kidnapping",
    "animal cruelty", "animal fighting", "dogfighting",

    # Cybercrime
    "hack into", "break into account", "crack password", "ddos",
    "ransomware", "malware", "keylogger", "unauthorized access",
    "stolen data", "data breach", "social engineering attack",
)

# Plausibly legitimate ("knife sharpening", "gun safe move", tenant
# "background check"); these hold the task for admin review.
FLAGGED_KEYWORDS: tuple[str, ...] = (
    "weapon", "gun", "knife", "blade",
    "drugs", "pills", "substances",
    "adult content", "adult entertainment",
    "gambling", "betting", "casino",
    "investigation", "private investigator",
    "background check",
)

SCANNED_FIELDS: tuple[str, ...] = ("title", "description")


@lru_cache(maxsize=1024)
def keyword_pattern(keyword: str) -> re.Pattern[str]:
    """Word-boundary, case-insensitive pattern for one keyword."""
    return re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)


def match_keywords(text: str, keywords: Iterable[str]) -> list[str]:
    """Return the keywords that occur in `text` as whole words."""
    return [keyword for keyword in keywords if keyword and keyword_pattern(keyword).search(text)]


def scan_prohibited_content(
    payload: Mapping[str, Any],
    config: TaskTypeConfig | None = None,
) -> ValidationResult:
    """Scan title and description; findings are attributed to the field they occur in."""
    result = ValidationResult()

    for field in SCANNED_FIELDS:
        text = payload.get(field)
        if not text or not isinstance(text, str):
            continue

        if match_keywords(text, PROHIBITED_KEYWORDS):
            result.errors.append(make_issue(
                field, ErrorCode.PROHIBITED_CONTENT,
                f"{field} contains prohibited content that violates our content policy",
                suggestion="Review the prohibited content guidelines at GET /api/schemas",
            ))

        if config is not None and match_keywords(text, config.prohibited_keywords):
            result.errors.append(make_issue(
                field, ErrorCode.PROHIBITED_CONTENT,
                f"{field} contains content prohibited for {config.display_name} tasks",
                suggestion=f"Review the task type schema at GET /api/schemas/{config.id}",
            ))

        if match_keywords(text, FLAGGED_KEYWORDS):
            result.flagged = True
            result.warnings.append(make_issue(
                field, ErrorCode.PROHIBITED_CONTENT,
                f"{field} contains content that requires manual review before the task becomes visible",
                suggestion="The task will be created but held for review. "
                           "Consider rephrasing if this was unintentional.",
            ))

    return result


class ContentPolicyGate(ValidationGate):
    """Gate wrapper around scan_prohibited_content()."""

    name = "content_policy"
    description = "Prohibited and review-worthy content"

    def check(self, payload, config, **context) -> ValidationResult:
        return scan_prohibited_content(payload, config)
