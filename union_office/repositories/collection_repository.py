"""Generic repository over one tenant-scoped collection."""

from typing import Generic, TypeVar

from union_office.models.record import TenantRecord
from union_office.repositories.storage import StorageAdapter

RecordT = TypeVar("RecordT", bound=TenantRecord)


class CollectionRepository(Generic[RecordT]):
    """
    Repository for one named collection with multi-tenant support.

    Every read filters by sede_id. Every write loads the full collection,
    changes it in memory and writes it back with the revision it was read
    at, so a concurrent writer surfaces as ConflictException.

    Subclasses set `key` (storage key) and `model` (record type).
    """

    key: str
    model: type[RecordT]

    def __init__(self, storage: StorageAdapter):
        self.storage = storage

    def _load(self) -> tuple[list[RecordT], int]:
        snapshot = self.storage.snapshot(self.key)
        return [self.model.model_validate(raw) for raw in snapshot.records], snapshot.revision

    def _store(self, records: list[RecordT], revision: int) -> None:
        self.storage.write(
            self.key,
            [record.model_dump(mode="json") for record in records],
            expected_revision=revision,
        )

    def get_all(self) -> list[RecordT]:
        """All records of every office (store-wide)"""
        return self._load()[0]

    def get_by_tenant(self, sede_id: str) -> list[RecordT]:
        """Get all records for an office, in insertion order"""
        return [record for record in self.get_all() if record.sede_id == sede_id]

    def get_by_id_and_tenant(self, record_id: str, sede_id: str) -> RecordT | None:
        """
        Get record ensuring it belongs to the office (multi-tenant safety).

        Returns None if record doesn't exist or belongs to another office.
        """
        for record in self.get_all():
            if record.id == record_id and record.sede_id == sede_id:
                return record
        return None

    def upsert(self, record: RecordT, sede_id: str) -> bool:
        """
        Create or update a record inside an office.

        The record's sede_id is overwritten with the given office before
        the lookup, so a forged sede_id can never reach another office's
        data. Returns True when the record was created.
        """
        records, revision = self._load()
        record.sede_id = sede_id

        index = next(
            (i for i, existing in enumerate(records) if existing.id == record.id and existing.sede_id == sede_id),
            None,
        )
        if index is None:
            records.append(record)
        else:
            records[index] = record

        self._store(records, revision)
        return index is None

    def delete_by_id_and_tenant(self, record_id: str, sede_id: str) -> bool:
        """
        Remove a record of the office.

        Ids belonging to another office never match; the call is then a
        no-op and returns False.
        """
        records, revision = self._load()
        remaining = [r for r in records if not (r.id == record_id and r.sede_id == sede_id)]
        if len(remaining) == len(records):
            return False
        self._store(remaining, revision)
        return True
