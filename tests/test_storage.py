import pytest

from union_office.core.exceptions import ConflictException
from union_office.models.storage_entry import StorageEntry
from union_office.repositories.storage import MemoryStorage, SqlStorage, StorageKeys


@pytest.fixture(params=["memory", "sql"])
def adapter(request, db_session):
    """Run each test against both storage adapters"""
    if request.param == "memory":
        return MemoryStorage()
    return SqlStorage(db_session)


class TestCollections:
    """Tests for whole-collection reads and writes"""

    def test_missing_key_reads_empty(self, adapter):
        snapshot = adapter.snapshot(StorageKeys.MEMBERS)
        assert snapshot.records == []
        assert snapshot.revision == 0
        assert adapter.read(StorageKeys.MEMBERS) == []

    def test_write_replaces_value_and_bumps_revision(self, adapter):
        assert adapter.write(StorageKeys.CASES, [{"id": "a"}]) == 1
        assert adapter.write(StorageKeys.CASES, [{"id": "b"}, {"id": "c"}]) == 2

        snapshot = adapter.snapshot(StorageKeys.CASES)
        assert snapshot.records == [{"id": "b"}, {"id": "c"}]
        assert snapshot.revision == 2

    def test_read_returns_copy(self, adapter):
        """Mutating a read value must not change what is stored"""
        adapter.write(StorageKeys.EVENTS, [{"id": "a", "title": "Assemblea"}])

        records = adapter.read(StorageKeys.EVENTS)
        records[0]["title"] = "Changed"
        records.append({"id": "b"})

        assert adapter.read(StorageKeys.EVENTS) == [{"id": "a", "title": "Assemblea"}]

    def test_stale_revision_rejected(self, adapter):
        adapter.write(StorageKeys.DOCUMENTS, [{"id": "a"}])
        stale = adapter.snapshot(StorageKeys.DOCUMENTS)

        # Another writer gets in first
        adapter.write(StorageKeys.DOCUMENTS, [{"id": "a"}, {"id": "b"}], expected_revision=stale.revision)

        with pytest.raises(ConflictException):
            adapter.write(StorageKeys.DOCUMENTS, stale.records + [{"id": "c"}], expected_revision=stale.revision)

        assert adapter.read(StorageKeys.DOCUMENTS) == [{"id": "a"}, {"id": "b"}]

    def test_expected_revision_zero_for_new_key(self, adapter):
        assert adapter.write(StorageKeys.LOGS, [], expected_revision=0) == 1

        with pytest.raises(ConflictException):
            adapter.write(StorageKeys.LOGS, [], expected_revision=0)

    def test_keys_are_independent(self, adapter):
        adapter.write(StorageKeys.MEMBERS, [{"id": "m"}])
        adapter.write(StorageKeys.CASES, [{"id": "c"}])

        assert adapter.read(StorageKeys.MEMBERS) == [{"id": "m"}]
        assert adapter.read(StorageKeys.CASES) == [{"id": "c"}]


class TestSingleSlot:
    """Tests for single-record slots (current session)"""

    def test_empty_slot_reads_none(self, adapter):
        assert adapter.read_one(StorageKeys.SESSION) is None

    def test_write_read_remove(self, adapter):
        adapter.write_one(StorageKeys.SESSION, {"id": "u1", "email": "anna@sederoma.it"})
        assert adapter.read_one(StorageKeys.SESSION) == {"id": "u1", "email": "anna@sederoma.it"}

        adapter.write_one(StorageKeys.SESSION, {"id": "u2"})
        assert adapter.read_one(StorageKeys.SESSION) == {"id": "u2"}

        adapter.remove(StorageKeys.SESSION)
        assert adapter.read_one(StorageKeys.SESSION) is None

    def test_slot_can_be_reused_after_remove(self, adapter):
        adapter.write_one(StorageKeys.SESSION, {"id": "u1"})
        adapter.remove(StorageKeys.SESSION)
        adapter.write_one(StorageKeys.SESSION, {"id": "u1"})

        assert adapter.read_one(StorageKeys.SESSION) == {"id": "u1"}

    def test_remove_missing_key_is_noop(self, adapter):
        adapter.remove(StorageKeys.SESSION)
        assert adapter.read_one(StorageKeys.SESSION) is None

    def test_collection_is_not_a_slot(self, adapter):
        adapter.write(StorageKeys.USERS, [{"id": "u1"}])
        assert adapter.read_one(StorageKeys.USERS) is None


def test_sql_storage_persists_rows(db_session):
    """SqlStorage keeps one storage_entries row per key"""
    storage = SqlStorage(db_session)
    storage.write(StorageKeys.MEMBERS, [{"id": "m1"}])
    storage.write(StorageKeys.MEMBERS, [{"id": "m1"}, {"id": "m2"}])

    rows = db_session.query(StorageEntry).all()
    assert len(rows) == 1
    assert rows[0].key == StorageKeys.MEMBERS
    assert rows[0].revision == 2
    assert rows[0].value == [{"id": "m1"}, {"id": "m2"}]
