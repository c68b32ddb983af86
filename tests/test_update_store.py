"""Tests for the in-memory update store."""

import pytest

from domains.updates import RetentionError, UpdateStore, ValidationError


def _record(store, day, author_id, text, name="Alice", handle="alice", at="10:00:00"):
    return store.record_update(day, author_id, name, handle, text, at)


def test_updates_listed_in_submission_order(store):
    """Updates for a day come back in exact call order."""
    texts = ["first", "second", "third", "fourth"]
    for i, text in enumerate(texts):
        _record(store, "2024-06-03", author_id=i % 2, text=text)

    listed = store.list_updates("2024-06-03")

    assert [u.text for u in listed] == texts


def test_empty_day_returns_empty_list(store):
    """Unknown days are empty, not an error."""
    assert store.list_updates("2024-01-01") == []
    assert store.list_updates_for_author("2024-01-01", 42) == []


def test_author_filter_matches_filtered_listing(store):
    """Per-author listing equals the day listing filtered by author."""
    for i, author in enumerate([1, 2, 1, 3, 1, 2]):
        _record(store, "2024-06-03", author_id=author, text=f"update {i}")

    for author in (1, 2, 3, 4):
        expected = [u for u in store.list_updates("2024-06-03") if u.author_id == author]
        assert store.list_updates_for_author("2024-06-03", author) == expected


def test_record_returns_stored_entry(store):
    """record_update returns the immutable entry it stored."""
    update = _record(store, "2024-06-03", 7, "  finished module 2  ", at="09:30:12")

    assert update.text == "finished module 2"
    assert update.submitted_at == "09:30:12"
    assert update.day == "2024-06-03"
    with pytest.raises(AttributeError):
        update.text = "changed"


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_text_rejected(store, text):
    """Blank text is rejected and nothing is stored."""
    with pytest.raises(ValidationError):
        _record(store, "2024-06-03", 1, text)

    assert store.list_updates("2024-06-03") == []
    assert store.days() == []


def test_days_are_independent(store):
    """Entries land only in their own day bucket."""
    _record(store, "2024-06-03", 1, "late night")
    _record(store, "2024-06-04", 1, "early morning")

    assert [u.text for u in store.list_updates("2024-06-03")] == ["late night"]
    assert [u.text for u in store.list_updates("2024-06-04")] == ["early morning"]
    assert store.days() == ["2024-06-03", "2024-06-04"]


def test_listing_is_a_copy(store):
    """Mutating a returned listing doesn't touch the store."""
    _record(store, "2024-06-03", 1, "one")

    listed = store.list_updates("2024-06-03")
    listed.clear()

    assert len(store.list_updates("2024-06-03")) == 1


def test_retention_evicts_oldest_days():
    """With retain_days set, only the newest N buckets survive."""
    store = UpdateStore(retain_days=2)

    _record(store, "2024-06-01", 1, "a")
    _record(store, "2024-06-02", 1, "b")
    _record(store, "2024-06-03", 1, "c")

    assert store.days() == ["2024-06-02", "2024-06-03"]
    assert store.list_updates("2024-06-01") == []


def test_write_older_than_window_is_rejected():
    """A late write for an evicted day must not drop the newest bucket."""
    store = UpdateStore(retain_days=1)
    _record(store, "2024-06-04", 1, "today")

    with pytest.raises(RetentionError):
        _record(store, "2024-06-03", 1, "late")

    assert store.days() == ["2024-06-04"]
    assert [u.text for u in store.list_updates("2024-06-04")] == ["today"]


def test_write_inside_window_keeps_newer_days():
    store = UpdateStore(retain_days=2)
    _record(store, "2024-06-03", 1, "a")
    _record(store, "2024-06-05", 1, "c")

    _record(store, "2024-06-04", 1, "b")

    assert store.days() == ["2024-06-04", "2024-06-05"]
    assert store.list_updates("2024-06-03") == []


def test_retention_must_be_positive():
    with pytest.raises(ValueError):
        UpdateStore(retain_days=0)
