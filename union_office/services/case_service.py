from datetime import datetime

from union_office.models.case import Case, CaseFile, CaseStatus, CaseTimelineEvent
from union_office.models.tenant_context import TenantContext
from union_office.repositories.case_repository import CaseRepository
from union_office.schemas.case_schemas import CaseCreate, CaseUpdate
from union_office.services.record_service import SaveResult, TenantRecordService


def status_label(status: CaseStatus) -> str:
    return status.value.upper().replace("-", " ")


class CaseService(TenantRecordService[Case]):
    """Service layer for case business logic"""

    repository_class = CaseRepository
    not_found_message = "Case not found"
    create_label = "New Case"
    update_label = "Case Updated"
    delete_label = "Case Deleted"

    def describe(self, record: Case) -> str:
        return record.title

    def create_details(self, record: Case) -> str:
        return f"Opened new case: {record.title}"

    def update_details(self, record: Case) -> str:
        return f"Modified case: {record.title}"

    def delete_details(self, record_id: str) -> str:
        return f"Removed case ID: {record_id}"

    def list_cases(
        self,
        context: TenantContext,
        status: CaseStatus | None = None,
        member_id: str | None = None,
    ) -> list[Case]:
        return self.repo.get_with_filters(context.sede_id, status=status, member_id=member_id)

    def _timeline_event(self, context: TenantContext, content: str) -> CaseTimelineEvent:
        return CaseTimelineEvent(user=context.user.operator_name, content=content)

    def create_case(self, data: CaseCreate, context: TenantContext) -> SaveResult[Case]:
        """
        Open a new case in the acting user's office.

        The member reference is not checked against the member registry.
        """
        fields = data.model_dump(exclude={"attachment"})
        case = Case(**fields)
        if data.attachment is not None:
            case.attachment = CaseFile(
                **data.attachment.model_dump(), uploaded_by=context.user.operator_name
            )
        return self.save(case, context)

    def update_case(self, case_id: str, data: CaseUpdate, context: TenantContext) -> SaveResult[Case]:
        """
        Update case fields that were provided.

        A status change is appended to the timeline. Sending attachment
        replaces the current one; remove_attachment drops it.

        Raises:
            NotFoundException: If case not found in this office
            ValidationException: If a required field is set to null
        """
        case = self.get(case_id, context)
        changes = data.model_dump(exclude_unset=True, exclude={"attachment", "remove_attachment"})
        updated = self.apply_changes(case, changes)

        if data.remove_attachment:
            updated.attachment = None
        elif data.attachment is not None:
            updated.attachment = CaseFile(
                **data.attachment.model_dump(), uploaded_by=context.user.operator_name
            )

        if updated.status != case.status:
            updated.timeline.append(
                self._timeline_event(context, f"Moved to status: {status_label(updated.status)}")
            )

        updated.last_modified = datetime.now()
        return self.save(updated, context)

    def change_status(self, case_id: str, status: CaseStatus, context: TenantContext) -> Case:
        """
        Move a case to another status (any status to any status).

        Moving to the current status changes nothing and writes nothing.

        Raises:
            NotFoundException: If case not found in this office
        """
        case = self.get(case_id, context)
        if case.status == status:
            return case

        case.status = status
        case.last_modified = datetime.now()
        case.timeline.append(self._timeline_event(context, f"Moved to status: {status_label(status)}"))
        return self.save(case, context).record

    def add_note(self, case_id: str, content: str, context: TenantContext) -> Case:
        """
        Append a free-text note to the case timeline.

        Raises:
            NotFoundException: If case not found in this office
        """
        case = self.get(case_id, context)
        case.timeline.append(self._timeline_event(context, content))
        case.last_modified = datetime.now()
        return self.save(case, context).record
