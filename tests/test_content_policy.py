from __future__ import annotations

import pytest

from conftest import CLEANING_CONFIG

from taskgate.core.constants import ErrorCode
from taskgate.validation.content_policy import match_keywords, scan_prohibited_content
from taskgate.validation.types import TaskTypeConfig


def test_therapist_is_not_rapist() -> None:
    result = scan_prohibited_content({"description": "Looking for a therapist to help with stress"})

    assert result.errors == []
    assert not result.flagged


def test_prohibited_keyword_is_hard_block() -> None:
    result = scan_prohibited_content({"description": "Need help with cocaine delivery"})

    assert [e.code for e in result.errors] == [ErrorCode.PROHIBITED_CONTENT]
    assert result.errors[0].field == "description"


def test_matching_is_case_insensitive() -> None:
    result = scan_prohibited_content({"title": "Buy a FAKE ID for me"})

    assert len(result.errors) == 1


def test_multiple_prohibited_hits_in_one_field_report_once() -> None:
    result = scan_prohibited_content({"description": "heroin, fentanyl and a fake passport"})

    assert len(result.errors) == 1


def test_each_scanned_field_reported_separately() -> None:
    result = scan_prohibited_content({
        "title": "Blackmail job",
        "description": "Help me blackmail my neighbour",
    })

    assert {e.field for e in result.errors} == {"title", "description"}


@pytest.mark.parametrize(
    "text",
    [
        "Sharpen my kitchen knife set",
        "Move a gun safe to the basement",
        "Tenant background check paperwork",
    ],
)
def test_flagged_keyword_is_warning_and_flags(text: str) -> None:
    result = scan_prohibited_content({"description": text})

    assert result.errors == []
    assert result.flagged
    assert [w.code for w in result.warnings] == [ErrorCode.PROHIBITED_CONTENT]


def test_flagged_word_inside_longer_word_does_not_match() -> None:
    result = scan_prohibited_content({"description": "Help with gundam model painting and bladed fan cleaning"})

    assert not result.flagged


def test_task_type_keywords_extend_hard_block() -> None:
    config = TaskTypeConfig.from_mapping({**CLEANING_CONFIG, "prohibited_keywords": ["biohazard"]})

    result = scan_prohibited_content({"description": "Clean up a biohazard spill"}, config)

    assert len(result.errors) == 1
    assert "Cleaning" in result.errors[0].message


def test_non_text_fields_are_skipped() -> None:
    result = scan_prohibited_content({"title": None, "description": ["cocaine"], "location_zone": "meth lab"})

    assert result.errors == []


def test_match_keywords_returns_hits() -> None:
    assert match_keywords("bring a knife and a blade", ["knife", "blade", "gun"]) == ["knife", "blade"]
