"""Key/value storage adapters for the named collections."""

import copy
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from sqlalchemy import select, insert, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from union_office.core.exceptions import ConflictException
from union_office.models.storage_entry import StorageEntry

logger = logging.getLogger(__name__)


class StorageKeys:
    """Stable keys of the persisted collections"""

    USERS = "gs_users"
    OFFICES = "gs_offices"
    SESSION = "gs_current_session"
    MEMBERS = "gs_members"
    CASES = "gs_cases"
    EVENTS = "gs_events"
    DOCUMENTS = "gs_documents"
    NOTIFICATIONS = "gs_notifications"
    LOGS = "gs_activity_logs"


def _conflict(key: str, what: str = "modified") -> ConflictException:
    logger.warning("Rejected stale write to collection %s", key)
    return ConflictException(f"Collection '{key}' was {what} concurrently, retry the operation")


@dataclass
class Snapshot:
    """Collection contents together with the revision they were read at"""

    records: list[dict] = field(default_factory=list)
    revision: int = 0


class StorageAdapter(ABC):
    """
    Get/set of a keyed JSON value.

    Writes replace the whole value; there are no partial updates. A missing
    key reads as an empty collection at revision 0.

    Passing expected_revision to write() turns the read-modify-write done
    by the repositories into an optimistic-concurrency check: if another
    writer replaced the value since the snapshot was taken, the write is
    refused with ConflictException instead of silently overwriting it.
    """

    @abstractmethod
    def snapshot(self, key: str) -> Snapshot:
        """Read the collection stored under key with its revision"""

    @abstractmethod
    def write(self, key: str, records: list[dict], expected_revision: int | None = None) -> int:
        """Replace the collection stored under key, returning the new revision"""

    @abstractmethod
    def read_one(self, key: str) -> dict | None:
        """Read a single-record slot"""

    @abstractmethod
    def write_one(self, key: str, record: dict) -> None:
        """Replace a single-record slot"""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete whatever is stored under key"""

    def read(self, key: str) -> list[dict]:
        return self.snapshot(key).records


class SqlStorage(StorageAdapter):
    """StorageAdapter backed by the storage_entries table"""

    def __init__(self, db: Session):
        self.db = db

    def _fetch(self, key: str):
        # Column select, so the values always come from the database rather
        # than from an ORM object cached in the session.
        return self.db.execute(
            select(StorageEntry.value, StorageEntry.revision).where(StorageEntry.key == key)
        ).first()

    def snapshot(self, key: str) -> Snapshot:
        row = self._fetch(key)
        if row is None or not isinstance(row.value, list):
            return Snapshot(records=[], revision=row.revision if row else 0)
        return Snapshot(records=copy.deepcopy(row.value), revision=row.revision)

    def write(self, key: str, records: list[dict], expected_revision: int | None = None) -> int:
        row = self._fetch(key)
        current = row.revision if row else 0

        if expected_revision is not None and expected_revision != current:
            raise _conflict(key)

        if row is None:
            try:
                self.db.execute(insert(StorageEntry).values(key=key, value=records, revision=1))
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                raise _conflict(key, "created")
            return 1

        result = self.db.execute(
            update(StorageEntry)
            .where(StorageEntry.key == key, StorageEntry.revision == current)
            .values(value=records, revision=current + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise _conflict(key)
        self.db.commit()
        return current + 1

    def read_one(self, key: str) -> dict | None:
        row = self._fetch(key)
        if row is None or not isinstance(row.value, dict):
            return None
        return copy.deepcopy(row.value)

    def write_one(self, key: str, record: dict) -> None:
        row = self._fetch(key)
        if row is None:
            self.db.execute(insert(StorageEntry).values(key=key, value=record, revision=1))
        else:
            self.db.execute(
                update(StorageEntry)
                .where(StorageEntry.key == key)
                .values(value=record, revision=row.revision + 1)
                .execution_options(synchronize_session=False)
            )
        self.db.commit()

    def remove(self, key: str) -> None:
        self.db.execute(
            delete(StorageEntry)
            .where(StorageEntry.key == key)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()


class MemoryStorage(StorageAdapter):
    """
    In-process StorageAdapter.

    Values are kept JSON-encoded so callers never share mutable state with
    the store, matching the copy semantics of the database adapter.
    """

    def __init__(self):
        self._values: dict[str, str] = {}
        self._revisions: dict[str, int] = {}

    def snapshot(self, key: str) -> Snapshot:
        raw = self._values.get(key)
        records = json.loads(raw) if raw is not None else []
        if not isinstance(records, list):
            records = []
        return Snapshot(records=records, revision=self._revisions.get(key, 0))

    def write(self, key: str, records: list[dict], expected_revision: int | None = None) -> int:
        current = self._revisions.get(key, 0)
        if expected_revision is not None and expected_revision != current:
            raise _conflict(key)
        self._values[key] = json.dumps(records)
        self._revisions[key] = current + 1
        return current + 1

    def read_one(self, key: str) -> dict | None:
        raw = self._values.get(key)
        value = json.loads(raw) if raw is not None else None
        return value if isinstance(value, dict) else None

    def write_one(self, key: str, record: dict) -> None:
        self._values[key] = json.dumps(record)
        self._revisions[key] = self._revisions.get(key, 0) + 1

    def remove(self, key: str) -> None:
        self._values.pop(key, None)
        self._revisions.pop(key, None)
