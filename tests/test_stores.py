"""Tests for the entry store adapters.

Both adapters implement the same EntryStore protocol, so every test here
runs against each of them.
"""

import threading
from datetime import date, datetime

import pytest

from worklog.adapters.memory_entry_store import InMemoryEntryStore
from worklog.adapters.sql_entry_store import SqlEntryStore
from worklog.core.entries import EntryType
from worklog.core.errors import NotFoundError, ValidationError
from worklog.core.weeks import group_by_week


@pytest.fixture(params=["memory", "sql"])
def store(request, tmp_path):
    if request.param == "memory":
        return InMemoryEntryStore()
    sql_store = SqlEntryStore.from_url(f"sqlite:///{tmp_path / 'worklog.db'}")
    sql_store.create_schema()
    return sql_store


class TestCreateEntry:
    def test_assigns_id_and_normalizes(self, store):
        entry = store.create_entry("2024-01-03", "work", "Shipped the release")

        assert entry.id is not None
        assert entry.date == date(2024, 1, 3)
        assert entry.type == EntryType.WORK
        assert entry.text == "Shipped the release"

    def test_datetime_stored_as_calendar_date(self, store):
        store.create_entry(datetime(2024, 1, 3, 9, 0), "work", "A")
        store.create_entry(datetime(2024, 1, 4, 17, 30), "work", "B")

        entries = store.list_entries()
        assert all(type(e.date) is date for e in entries)
        weeks = group_by_week(entries)
        assert len(weeks) == 1
        assert weeks[0].week_start == date(2024, 1, 1)

    def test_ids_are_unique_and_increasing(self, store):
        first = store.create_entry("2024-01-03", "work", "one")
        second = store.create_entry("2024-01-03", "work", "two")
        assert second.id > first.id

    def test_invalid_type_writes_nothing(self, store):
        with pytest.raises(ValidationError):
            store.create_entry("2024-01-03", "invalid", "text")
        assert store.list_entries() == []

    def test_missing_text_writes_nothing(self, store):
        store.create_entry("2024-01-03", "work", "kept")
        with pytest.raises(ValidationError, match="text"):
            store.create_entry("2024-01-03", "work", "")
        assert [e.text for e in store.list_entries()] == ["kept"]


class TestUpdateEntry:
    def test_replaces_fields(self, store):
        entry = store.create_entry("2024-01-03", "work", "draft")

        updated = store.update_entry(entry.id, "2024-01-04", "thoughts", "final")

        assert updated.id == entry.id
        assert store.get_entry(entry.id) == updated
        assert updated.type == EntryType.THOUGHTS
        assert updated.date == date(2024, 1, 4)

    def test_unknown_id(self, store):
        with pytest.raises(NotFoundError):
            store.update_entry(999, "2024-01-03", "work", "text")

    def test_invalid_fields_leave_entry_unchanged(self, store):
        entry = store.create_entry("2024-01-03", "work", "original")
        with pytest.raises(ValidationError):
            store.update_entry(entry.id, "2024-01-03", "nope", "changed")
        assert store.get_entry(entry.id).text == "original"


class TestDeleteEntry:
    def test_removes_entry(self, store):
        entry = store.create_entry("2024-01-03", "work", "gone soon")
        store.delete_entry(entry.id)

        assert store.list_entries() == []
        with pytest.raises(NotFoundError):
            store.get_entry(entry.id)

    def test_unknown_id_leaves_others(self, store):
        kept = store.create_entry("2024-01-03", "learnings", "kept")
        with pytest.raises(NotFoundError):
            store.delete_entry(kept.id + 100)
        assert store.list_entries() == [kept]

    def test_repeated_delete_raises(self, store):
        entry = store.create_entry("2024-01-03", "work", "once")
        store.delete_entry(entry.id)
        with pytest.raises(NotFoundError):
            store.delete_entry(entry.id)

    def test_ids_not_reused(self, store):
        first = store.create_entry("2024-01-03", "work", "one")
        store.delete_entry(first.id)
        second = store.create_entry("2024-01-03", "work", "two")
        assert second.id != first.id


class TestListEntries:
    def test_returns_everything(self, store):
        created = [
            store.create_entry("2024-01-03", "work", "A"),
            store.create_entry("2024-01-01", "learnings", "B"),
            store.create_entry("2023-12-30", "thoughts", "C"),
        ]
        listed = sorted(store.list_entries(), key=lambda e: e.id)
        assert listed == created

    def test_returned_entries_are_copies(self):
        store = InMemoryEntryStore()
        entry = store.create_entry("2024-01-03", "work", "A")
        entry.text = "mutated"
        assert store.get_entry(entry.id).text == "A"


class TestSqlEntryStore:
    def test_data_survives_new_store_instance(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'worklog.db'}"
        store = SqlEntryStore.from_url(url)
        store.create_schema()
        entry = store.create_entry("2024-01-03", "work", "persisted")

        reopened = SqlEntryStore.from_url(url)
        assert reopened.get_entry(entry.id) == entry

    @pytest.mark.parametrize("url", ["sqlite://", "sqlite:///:memory:"])
    def test_in_memory_database_shared_across_threads(self, url):
        store = SqlEntryStore.from_url(url)
        store.create_schema()
        store.create_entry("2024-01-03", "work", "from main thread")

        seen = []
        worker = threading.Thread(target=lambda: seen.extend(store.list_entries()))
        worker.start()
        worker.join()

        assert [e.text for e in seen] == ["from main thread"]
