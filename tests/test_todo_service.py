"""
Unit tests for ToDoService: stamping, formatting and last-item lookup.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from todo_api.app.services.todo_service import NO_ITEMS, ToDoService


def test_list_matches_adds_in_order(service):
    texts = ["buy milk", "walk dog", "buy milk", "call mum"]
    for text in texts:
        service.add(text)

    listed = service.list()
    assert len(listed) == len(texts)
    assert [line.split(" - ", 1)[1] for line in listed] == texts


def test_list_is_not_sorted_by_time(store):
    times = iter([
        datetime(2026, 5, 2, tzinfo=timezone.utc),
        datetime(2026, 5, 1, tzinfo=timezone.utc),
    ])
    service = ToDoService(store=store, clock=lambda: next(times))
    service.add("later")
    service.add("earlier")

    assert [line.split(" - ", 1)[1] for line in service.list()] == ["later", "earlier"]


def test_empty_text_is_accepted(service):
    # Empty text is stored as-is; only a missing parameter is rejected.
    service.add("")

    assert len(service.list()) == 1
    assert service.list()[0].endswith(" - ")


def test_last_on_empty_store(service):
    assert service.last() == NO_ITEMS == "No items"


def test_last_after_single_add(service):
    service.add("x")

    assert service.last().endswith(" - x")


def test_last_returns_newest_item(service):
    service.add("a")
    service.add("b")

    assert service.last().endswith(" - b")


def test_last_uses_timestamp_not_position(store):
    times = iter([
        datetime(2026, 5, 2, tzinfo=timezone.utc),
        datetime(2026, 5, 1, tzinfo=timezone.utc),
    ])
    service = ToDoService(store=store, clock=lambda: next(times))
    service.add("newest")
    service.add("backdated")

    assert service.last().endswith(" - newest")


def test_last_tie_prefers_most_recently_inserted(store, frozen_clock):
    service = ToDoService(store=store, clock=frozen_clock)
    for text in ["first", "second", "third"]:
        service.add(text)

    assert service.last().endswith(" - third")


def test_display_format(service):
    service.add("milk")

    assert service.list() == ["Sun Oct 18 09:15:00 UTC 2026 - milk"]


def test_add_returns_stamped_item(service, clock):
    expected = clock.now
    item = service.add("milk")

    assert item.text == "milk"
    assert item.modified == expected


def test_items_are_immutable(service):
    item = service.add("milk")

    with pytest.raises(ValidationError):
        item.text = "eggs"


def test_default_clock_is_timezone_aware():
    service = ToDoService()
    item = service.add("now")

    assert item.modified.tzinfo is not None
