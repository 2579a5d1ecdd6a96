# tests for the identity-keyed entry store
# upsert ordering, lookups and snapshots

from tests.conftest import make_journal, make_mood
from medjournal.services.entry_store import EntryStore


class TestUpsert:
    """insert-or-replace by id"""

    def test_append_new_entries_in_order(self):
        store = EntryStore()
        for entry_id in ("A", "B", "C"):
            store.upsert(make_journal(entry_id, "2024-01-01"))
        assert [e.id for e in store.all()] == ["A", "B", "C"]

    def test_upsert_same_entry_twice_is_idempotent(self):
        store = EntryStore()
        entry = make_journal("A", "2024-01-01")
        store.upsert(entry)
        store.upsert(make_journal("B", "2024-01-02"))
        before = store.all()

        store.upsert(entry)
        assert store.all() == before
        assert len(store) == 2

    def test_replace_keeps_position(self):
        store = EntryStore()
        for entry_id in ("A", "B", "C"):
            store.upsert(make_journal(entry_id, "2024-01-01"))

        store.upsert(make_journal("B", "2024-01-01", sleep_hours=3))

        entries = store.all()
        assert [e.id for e in entries] == ["A", "B", "C"]
        assert entries[1].sleep_hours == 3

    def test_constructor_dedupes_by_id(self):
        store = EntryStore([
            make_mood("m1", "2024-01-01T08:00:00", mood=3),
            make_mood("m2", "2024-01-01T09:00:00"),
            make_mood("m1", "2024-01-01T08:00:00", mood=9),
        ])
        assert [e.id for e in store.all()] == ["m1", "m2"]
        assert store.find_by_id("m1").mood == 9


class TestLookups:
    """find_by_id, find_where and snapshots"""

    def test_find_by_id(self):
        store = EntryStore([make_journal("A", "2024-01-01")])
        assert store.find_by_id("A").date == "2024-01-01"
        assert store.find_by_id("missing") is None

    def test_find_where_keeps_store_order(self):
        store = EntryStore([
            make_journal("A", "2024-01-03"),
            make_journal("B", "2024-01-01"),
            make_journal("C", "2024-01-03"),
        ])
        found = store.find_where(lambda e: e.date == "2024-01-03")
        assert [e.id for e in found] == ["A", "C"]

    def test_all_returns_snapshot(self):
        store = EntryStore([make_journal("A", "2024-01-01")])
        snapshot = store.all()
        store.upsert(make_journal("B", "2024-01-02"))
        assert len(snapshot) == 1
        assert len(store.all()) == 2

    def test_contains_and_len(self):
        store = EntryStore([make_journal("A", "2024-01-01")])
        assert "A" in store
        assert "B" not in store
        assert len(store) == 1

    def test_replace_all_resets_index(self):
        store = EntryStore([make_journal("A", "2024-01-01"), make_journal("B", "2024-01-02")])
        store.replace_all([make_journal("C", "2024-01-03")])
        assert store.find_by_id("A") is None
        store.upsert(make_journal("D", "2024-01-04"))
        assert [e.id for e in store.all()] == ["C", "D"]
