"""Tenant-isolated create/update/delete shared by the office collections."""

import logging
from dataclasses import dataclass
from typing import Any, Generic

from pydantic import ValidationError

from union_office.core.exceptions import ForbiddenException, NotFoundException, ValidationException
from union_office.models.tenant_context import TenantContext
from union_office.repositories.collection_repository import CollectionRepository, RecordT
from union_office.repositories.storage import StorageAdapter
from union_office.services.activity_service import ActivityService

logger = logging.getLogger(__name__)


@dataclass
class SaveResult(Generic[RecordT]):
    record: RecordT
    created: bool


class TenantRecordService(Generic[RecordT]):
    """
    Service layer for one office collection.

    Subclasses provide the repository class, the activity labels and
    the human-readable description of a record. Every mutation writes the
    record under the acting user's office and appends one activity-log row.
    """

    repository_class: type[CollectionRepository]
    not_found_message = "Record not found"
    create_label = "Record Created"
    update_label = "Record Updated"
    delete_label = "Record Deleted"

    def __init__(self, storage: StorageAdapter, activity: ActivityService | None = None):
        self.storage = storage
        self.repo = self.repository_class(storage)
        self.activity = activity or ActivityService(storage)

    def describe(self, record: RecordT) -> str:
        return record.id

    def create_details(self, record: RecordT) -> str:
        return f"Created {self.describe(record)}"

    def update_details(self, record: RecordT) -> str:
        return f"Updated {self.describe(record)}"

    def delete_details(self, record_id: str) -> str:
        return f"Removed ID: {record_id}"

    def _require_write(self, context: TenantContext) -> None:
        if not context.can_write():
            raise ForbiddenException("Viewers cannot modify office data")

    def list_records(self, context: TenantContext) -> list[RecordT]:
        """All records of the acting user's office"""
        return self.repo.get_by_tenant(context.sede_id)

    def get(self, record_id: str, context: TenantContext) -> RecordT:
        """
        Get a record of the acting user's office.

        Raises:
            NotFoundException: If record not found or belongs to another office
        """
        record = self.repo.get_by_id_and_tenant(record_id, context.sede_id)
        if record is None:
            raise NotFoundException(self.not_found_message)
        return record

    def apply_changes(self, record: RecordT, changes: dict[str, Any]) -> RecordT:
        """
        Copy of record with changes applied, validated as a whole.

        Raises:
            ValidationException: If the result is not a valid record (e.g. a
                required field set to null)
        """
        try:
            return type(record).model_validate({**record.model_dump(), **changes})
        except ValidationError as e:
            fields = ", ".join(sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]}))
            raise ValidationException(f"Invalid value for: {fields}")

    def save(self, record: RecordT, context: TenantContext) -> SaveResult[RecordT]:
        """
        Create or update a record in the acting user's office.

        The record's sede_id is forced to the acting user's office. If a
        record with the same id already exists there it is replaced in
        place, otherwise it is appended.

        Raises:
            ForbiddenException: If user is a viewer
        """
        self._require_write(context)
        created = self.repo.upsert(record, context.sede_id)

        details = self.create_details(record) if created else self.update_details(record)
        self.activity.log(context.user, self.create_label if created else self.update_label, details)
        logger.info(
            "%s %s in office %s", "Created" if created else "Updated", record.id, context.sede_id
        )
        return SaveResult(record=record, created=created)

    def delete(self, record_id: str, context: TenantContext) -> bool:
        """
        Delete a record of the acting user's office.

        Ids of other offices are never matched: the call is then a no-op
        returning False. The activity row is written either way.

        Raises:
            ForbiddenException: If user is a viewer
        """
        self._require_write(context)
        removed = self.repo.delete_by_id_and_tenant(record_id, context.sede_id)
        self.activity.log(context.user, self.delete_label, self.delete_details(record_id))
        if not removed:
            logger.info("Delete of %s in office %s matched nothing", record_id, context.sede_id)
        return removed
