"""
PII detection patterns with false-positive mitigation.

Each PiiPattern carries:
    - regex:  the compiled detection pattern
    - label:  human-readable PII type, used in error messages
    - mask:   renders a partially masked excerpt (always contains "***")
    - accept: optional (match_text, full_text) -> bool; False suppresses
              the match as a false positive
    - suggestion: which private field the value belongs in

PII_PATTERNS is ordered; the scanner walks it front to back and every
pattern runs regardless of what earlier patterns found.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable
from urllib.parse import urlsplit

MASK = "***"

# Quantities and measurements that look like "<number> <word>"
ADDRESS_FALSE_POSITIVES = re.compile(
    r"\b(\d+)\s*(bedroom|br|bath|ba|story|stories|floor|sqft|sq\s*ft|square\s*feet|acre|lot"
    r"|unit[s]?\b(?!\s*\d)|item|step|hour|minute|piece|pound|lb|kg|inch|foot|feet|meter|cm|mm"
    r"|gallon|liter|mile|km|year|month|week|day|task|star|review)",
    re.IGNORECASE,
)

STREET_SUFFIXES = (
    r"(?:St(?:reet)?|Ave(?:nue)?|Blvd|Boulevard|Dr(?:ive)?|Ln|Lane|Rd|Road|Ct|Court|Way"
    r"|Pl(?:ace)?|Cir(?:cle)?|Hwy|Highway|Pkwy|Parkway|Terr(?:ace)?|Crescent|Alley|Path)"
)

# Handles that are really the domain half of an email address
NON_SOCIAL_HANDLES = ("@gmail", "@yahoo", "@hotmail", "@outlook", "@example", "@test")

_NAME_AT_END = re.compile(r"\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)$")
_NON_DIGIT = re.compile(r"\D", re.ASCII)


@dataclass(frozen=True)
class PiiPattern:
    """One detection rule in the pattern library."""

    id: str
    regex: re.Pattern[str]
    label: str
    suggestion: str
    mask: Callable[[str], str]
    accept: Callable[[str, str], bool] | None = None

    def masked(self, match_text: str) -> str:
        return self.mask(match_text)

    def is_genuine(self, match_text: str, full_text: str) -> bool:
        if self.accept is None:
            return True
        return self.accept(match_text, full_text)


# ─── Maskers ───────────────────────────────────────────

def _mask_street_address(match: str) -> str:
    parts = match.split(" ")
    if len(parts) >= 3:
        return f"{parts[0]} {parts[1][:3]}{MASK} {parts[-1]}"
    return match[:6] + MASK


def _mask_local_street(match: str) -> str:
    parts = match.split()
    return f"{parts[0]} {parts[1][:3]}{MASK}"


def _mask_unit(match: str) -> str:
    return match.split()[0] + " " + MASK


def _mask_phone(match: str) -> str:
    digits = _NON_DIGIT.sub("", match)
    if len(digits) >= 7:
        return digits[:3] + MASK + digits[-3:]
    return MASK + digits[-3:]


def _mask_intl_phone(match: str) -> str:
    return match[:4] + MASK + match[-3:]


def _mask_email(match: str) -> str:
    local, _, domain = match.partition("@")
    return f"{local[:2]}{MASK}@{domain}"


def _mask_contact_name(match: str) -> str:
    name = _NAME_AT_END.search(match)
    if name:
        start, end = name.span(1)
        return match[:start] + name.group(1)[:2] + MASK + match[end:]
    return match[:10] + MASK


def _mask_handle(match: str) -> str:
    return "@" + match[1:4] + MASK


def _mask_prefix(match: str) -> str:
    return match[:10] + MASK


def _mask_url(match: str) -> str:
    try:
        parts = urlsplit(match)
    except ValueError:
        return match[:15] + MASK
    if not parts.hostname:
        return match[:15] + MASK
    return f"{parts.scheme}://{parts.hostname}/{MASK}"


def _mask_www(match: str) -> str:
    return "www." + match[4:10] + MASK


# ─── False-positive filters ────────────────────────────

def _not_a_measurement(match: str, full_text: str) -> bool:
    return ADDRESS_FALSE_POSITIVES.search(match) is None


def _has_phone_digit_count(match: str, full_text: str) -> bool:
    return len(_NON_DIGIT.sub("", match)) >= 7


def _not_an_email_domain(match: str, full_text: str) -> bool:
    lowered = match.lower()
    return not any(lowered.startswith(prefix) for prefix in NON_SOCIAL_HANDLES)


# ─── Library ───────────────────────────────────────────

ADDRESS_SUGGESTION = "Move address to the private_address field"
CONTACT_SUGGESTION = "Move contact information to the private_contact field"
PHONE_SUGGESTION = "Move phone number to the private_contact field"
SOCIAL_SUGGESTION = "Move social media info to the private_contact field"
URL_SUGGESTION = "Remove URLs from public fields or move to private_notes"

PII_PATTERNS: tuple[PiiPattern, ...] = (
    # "123 Main St", "45B Oak Avenue"
    PiiPattern(
        id="address_english",
        regex=re.compile(
            rf"\b(\d{{1,5}}[A-Za-z]?)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)\s+{STREET_SUFFIXES}\b",
            re.IGNORECASE,
        ),
        label="street address",
        suggestion=ADDRESS_SUGGESTION,
        mask=_mask_street_address,
        accept=_not_a_measurement,
    ),
    # "45B Nguyen Hue", "123 Le Loi"
    PiiPattern(
        id="address_vietnamese",
        regex=re.compile(
            r"\b(\d{1,5}[A-Za-z]?)\s+(Nguyen|Le|Tran|Pham|Hoang|Vo|Bui|Dang|Do|Ngo|Ly"
            r"|Hai\s+Ba\s+Trung|Dong\s+Khoi|Nam\s+Ky\s+Khoi\s+Nghia|Pasteur|Cach\s+Mang)\s+\w+",
            re.IGNORECASE,
        ),
        label="street address",
        suggestion=ADDRESS_SUGGESTION,
        mask=_mask_local_street,
    ),
    # "Apt 4B", "Unit 12", "Suite 300"
    PiiPattern(
        id="unit_number",
        regex=re.compile(
            r"\b(Apt\.?|Apartment|Unit|Suite|Ste\.?|Room|Rm\.?|#)\s*(\d+[A-Za-z]?)\b",
            re.IGNORECASE,
        ),
        label="unit/apartment number",
        suggestion="Move unit number to the private_address field",
        mask=_mask_unit,
    ),
    # Separators required: keeps ZIP codes and bare reference numbers out
    PiiPattern(
        id="phone",
        regex=re.compile(
            r"(?:\+\d{1,3}[-.\s]?)?(?:\(?\d{2,4}\)?[-.\s])?\d{3,4}[-.\s]\d{3,4}\b",
            re.ASCII,
        ),
        label="phone number",
        suggestion=PHONE_SUGGESTION,
        mask=_mask_phone,
        accept=_has_phone_digit_count,
    ),
    # "+84901234567"
    PiiPattern(
        id="phone_intl",
        regex=re.compile(r"\+\d{10,15}\b", re.ASCII),
        label="phone number",
        suggestion=PHONE_SUGGESTION,
        mask=_mask_intl_phone,
    ),
    PiiPattern(
        id="email",
        regex=re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"),
        label="email address",
        suggestion="Move email address to the private_contact field",
        mask=_mask_email,
    ),
    # "contact John Smith", "ask for Maria", "call Mr. Nguyen"
    PiiPattern(
        id="contact_name",
        regex=re.compile(
            r"\b(?:contact|ask\s+for|call|meet|speak\s+(?:to|with)|find|look\s+for|see)\s+"
            r"(?:Mr\.?|Mrs\.?|Ms\.?|Dr\.?)?\s*"
            r"((?-i:[A-Z][a-z]+)(?:\s+(?-i:[A-Z][a-z]+))?)\b",
            re.IGNORECASE,
        ),
        label="contact name",
        suggestion=CONTACT_SUGGESTION,
        mask=_mask_contact_name,
    ),
    PiiPattern(
        id="social_handle",
        regex=re.compile(r"@[a-zA-Z0-9_]{2,30}\b"),
        label="social media handle",
        suggestion=SOCIAL_SUGGESTION,
        mask=_mask_handle,
        accept=_not_an_email_domain,
    ),
    # "my instagram is", "find me on facebook"
    PiiPattern(
        id="social_reference",
        regex=re.compile(
            r"\b(?:my|find\s+me\s+on|follow\s+(?:me\s+)?on|add\s+me\s+on|check\s+(?:out\s+)?my)\s+"
            r"(?:instagram|facebook|twitter|tiktok|snapchat|linkedin|whatsapp|telegram|line|zalo"
            r"|wechat|viber)\b",
            re.IGNORECASE,
        ),
        label="social media reference",
        suggestion=SOCIAL_SUGGESTION,
        mask=_mask_prefix,
    ),
    PiiPattern(
        id="url",
        regex=re.compile(r"https?://[^\s<>\"']+", re.IGNORECASE),
        label="URL/link",
        suggestion=URL_SUGGESTION,
        mask=_mask_url,
    ),
    PiiPattern(
        id="www_url",
        regex=re.compile(r"\bwww\.[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}[^\s<>\"']*", re.IGNORECASE),
        label="URL/link",
        suggestion=URL_SUGGESTION,
        mask=_mask_www,
    ),
)

# Public fields that are scanned for PII
PUBLIC_FIELDS_TO_SCAN: tuple[str, ...] = ("title", "description", "location_zone", "requirements")

# Private fields where PII is allowed (encrypted at rest, never scanned)
PRIVATE_FIELDS: tuple[str, ...] = ("private_address", "private_notes", "private_contact")


def get_pattern(pattern_id: str) -> PiiPattern:
    """Look up a pattern by id.  Raises KeyError for unknown ids."""
    for pattern in PII_PATTERNS:
        if pattern.id == pattern_id:
            return pattern
    raise KeyError(pattern_id)
