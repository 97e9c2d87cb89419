"""Repository for Office records."""

from pydantic import TypeAdapter

from union_office.models.office import Office, normalize_office_name
from union_office.repositories.storage import StorageAdapter, StorageKeys

_offices = TypeAdapter(list[Office])


class OfficeRepository:
    """Repository for Office operations"""

    def __init__(self, storage: StorageAdapter):
        self.storage = storage

    def get_all(self) -> list[Office]:
        return _offices.validate_python(self.storage.read(StorageKeys.OFFICES))

    def get_by_id(self, office_id: str) -> Office | None:
        return next((o for o in self.get_all() if o.id == office_id), None)

    def get_by_name(self, name: str) -> Office | None:
        """
        Get office whose name matches ignoring case and extra whitespace.

        Args:
            name: Office name as typed at registration

        Returns:
            Office object or None if no office has that name
        """
        normalized = normalize_office_name(name)
        return next((o for o in self.get_all() if o.normalized_name == normalized), None)

    def create(self, name: str) -> Office:
        """
        Create a new office.

        Args:
            name: Display name of the office

        Returns:
            Created Office with its generated id
        """
        snapshot = self.storage.snapshot(StorageKeys.OFFICES)
        office = Office(name=name.strip(), normalized_name=normalize_office_name(name))
        snapshot.records.append(office.model_dump(mode="json"))
        self.storage.write(StorageKeys.OFFICES, snapshot.records, expected_revision=snapshot.revision)
        return office
