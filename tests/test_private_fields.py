from __future__ import annotations

from taskgate.privacy import strip_private_fields


def test_strip_removes_only_private_fields() -> None:
    task = {
        "id": "t-1",
        "title": "Clean apartment",
        "private_address": "123 Nguyen Hue",
        "private_notes": "Gate code 4521",
        "private_contact": "555-123-4567",
    }

    stripped = strip_private_fields(task)

    assert stripped == {"id": "t-1", "title": "Clean apartment"}
    # Shallow copy: the source row is untouched
    assert "private_address" in task


def test_strip_passes_none_through() -> None:
    assert strip_private_fields(None) is None


def test_strip_without_private_fields_is_a_copy() -> None:
    task = {"id": "t-2", "title": "Deliver groceries"}

    stripped = strip_private_fields(task)

    assert stripped == task
    assert stripped is not task
