from __future__ import annotations

import pytest

from taskgate.core.constants import ErrorCode
from taskgate.privacy.pii_patterns import MASK, PII_PATTERNS, get_pattern
from taskgate.validation.pii_scanner import scan_for_pii


def _scan_description(text: str):
    return scan_for_pii({"description": text})


def _labels(result) -> list[str]:
    return [e.message for e in result.errors]


@pytest.mark.parametrize(
    "text",
    [
        "Clean my 2 bedroom apartment this weekend",
        "Organise a 150 sqft office storage room",
        "Wash windows on a 3 story building",
        "Vacuum the hallway on the 5 floor of the tower",
    ],
)
def test_measurements_do_not_trigger_address(text: str) -> None:
    result = _scan_description(text)

    assert not any("street address" in m for m in _labels(result))


def test_english_street_address_detected_and_masked() -> None:
    result = _scan_description("Meet at 123 Main Street for pickup")

    errors = [e for e in result.errors if "street address" in e.message]
    assert len(errors) == 1
    assert errors[0].code == ErrorCode.PII_DETECTED
    assert errors[0].detected == "123 Mai*** Street"
    assert errors[0].suggestion == "Move address to the private_address field"


def test_vietnamese_street_detected() -> None:
    result = _scan_description("Deliver to 45 Nguyen Hue street near the fountain")

    assert any("street address" in m for m in _labels(result))


def test_unit_number_detected() -> None:
    result = scan_for_pii({"location_zone": "District 1, Apt 4B"})

    assert any("unit/apartment number" in m for m in _labels(result))


@pytest.mark.parametrize("phone", ["555-123-4567", "(555) 123-4567", "+84901234567"])
def test_phone_numbers_detected(phone: str) -> None:
    result = _scan_description(f"Text me on {phone} when you arrive")

    assert any("phone number" in m for m in _labels(result))


@pytest.mark.parametrize(
    "text",
    [
        "Order reference 1234567890 is already paid",
        "Located in ZIP 90210, downtown area",
    ],
)
def test_bare_numbers_are_not_phones(text: str) -> None:
    result = _scan_description(text)

    assert not any("phone number" in m for m in _labels(result))


def test_phone_masking_keeps_first_and_last_three_digits() -> None:
    result = _scan_description("Call 555-123-4567 anytime")

    error = next(e for e in result.errors if "phone number" in e.message)
    assert error.detected == "555***567"


def test_email_detected_and_masked() -> None:
    result = _scan_description("Send the invoice to jane.doe@example.com please")

    error = next(e for e in result.errors if "email address" in e.message)
    assert error.detected == "ja***@example.com"


def test_email_domain_is_not_a_social_handle() -> None:
    result = _scan_description("Reach me via someone@gmail.com")

    assert not any("social media handle" in m for m in _labels(result))


def test_social_handle_and_reference_detected() -> None:
    result = _scan_description("DM @cleanqueen99 or find me on instagram")

    labels = _labels(result)
    assert any("social media handle" in m for m in labels)
    assert any("social media reference" in m for m in labels)


def test_contact_name_requires_capitalised_name() -> None:
    flagged = _scan_description("When you get there ask for Maria at reception")
    clean = _scan_description("When you get there ask for help at reception")

    assert any("contact name" in m for m in _labels(flagged))
    assert not any("contact name" in m for m in _labels(clean))


def test_urls_masked_to_host() -> None:
    result = _scan_description("Photos at https://example.com/album/123 and www.mysite.net/gallery")

    url_errors = [e for e in result.errors if "URL/link" in e.message]
    assert url_errors[0].detected == "https://example.com/***"
    assert len(url_errors) == 2


def test_only_first_match_per_pattern_per_field() -> None:
    result = _scan_description("Call 555-123-4567 or 555-987-6543 or 555-111-2222")

    phone_errors = [e for e in result.errors if "phone number" in e.message]
    assert len(phone_errors) == 1


def test_same_pattern_reported_in_each_field() -> None:
    result = scan_for_pii({
        "title": "Call 555-123-4567",
        "description": "Or call 555-987-6543 after six",
    })

    assert {e.field for e in result.errors if "phone number" in e.message} == {"title", "description"}


def test_requirements_array_is_flattened() -> None:
    result = scan_for_pii({"requirements": ["bring gloves", "email bob@example.org first"]})

    assert any(e.field == "requirements" and "email address" in e.message for e in result.errors)


def test_private_fields_are_never_scanned() -> None:
    pii = "Call 555-123-4567, 123 Main Street, jane@example.com, @janedoe"

    result = scan_for_pii({
        "private_address": pii,
        "private_notes": pii,
        "private_contact": pii,
    })

    assert result.errors == []


@pytest.mark.parametrize(
    "text",
    [
        "123 Main Street",
        "Apt 4B",
        "555-123-4567",
        "+84901234567",
        "jane.doe@example.com",
        "contact John Smith",
        "@cleanqueen99",
        "my instagram",
        "https://example.com/page",
        "www.example.com",
    ],
)
def test_detected_value_is_always_masked(text: str) -> None:
    result = _scan_description(f"Details: {text} thanks")

    assert result.errors
    for error in result.errors:
        assert MASK in error.detected
        assert error.detected != text


def test_pattern_library_order_and_lookup() -> None:
    ids = [p.id for p in PII_PATTERNS]

    assert ids[0] == "address_english"
    assert ids.index("phone") < ids.index("email") < ids.index("url")
    assert get_pattern("email").label == "email address"
    with pytest.raises(KeyError):
        get_pattern("passport")


@pytest.mark.parametrize("text", ["٥٥٥-١٢٣-٤٥٦٧", "+٨٤٩٠١٢٣٤٥٦٧", "５５５-１２３-４５６７"])
def test_non_ascii_digits_are_not_phone_digits(text: str) -> None:
    result = _scan_description(f"Reference code {text} printed on the box")

    assert not any("phone number" in m for m in _labels(result))
