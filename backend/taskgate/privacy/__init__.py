"""
Privacy package: PII pattern library and private-field handling.

Public text is scanned with PII_PATTERNS; private fields are exempt from
scanning and are only ever stripped or released to authorized users.
"""

from taskgate.privacy.pii_patterns import (
    PII_PATTERNS,
    PRIVATE_FIELDS,
    PUBLIC_FIELDS_TO_SCAN,
    PiiPattern,
)
from taskgate.privacy.private_fields import strip_private_fields
from taskgate.privacy.release import PrivateFieldCipher, release_private_data

__all__ = [
    "PII_PATTERNS",
    "PRIVATE_FIELDS",
    "PUBLIC_FIELDS_TO_SCAN",
    "PiiPattern",
    "PrivateFieldCipher",
    "release_private_data",
    "strip_private_fields",
]
