from datetime import date

from union_office.models.member import Member, MemberHistoryEntry
from union_office.models.tenant_context import TenantContext
from union_office.repositories.member_repository import MemberRepository
from union_office.schemas.member_schemas import MemberCreate, MemberUpdate
from union_office.services.record_service import SaveResult, TenantRecordService


class MemberService(TenantRecordService[Member]):
    """Service for member registry business logic"""

    repository_class = MemberRepository
    not_found_message = "Member not found"
    create_label = "New Member"
    update_label = "Member Updated"
    delete_label = "Member Deleted"

    def describe(self, record: Member) -> str:
        return record.full_name

    def create_details(self, record: Member) -> str:
        return f"Added {record.full_name} to the registry"

    def update_details(self, record: Member) -> str:
        return f"Updated profile of {record.full_name}"

    def delete_details(self, record_id: str) -> str:
        return f"Removed member ID: {record_id}"

    def search(self, term: str, context: TenantContext) -> list[Member]:
        return self.repo.search(context.sede_id, term)

    def create_member(self, data: MemberCreate, context: TenantContext) -> SaveResult[Member]:
        """Enroll a new member in the acting user's office"""
        today = date.today()
        member = Member(
            **data.model_dump(),
            enrollment_date=today,
            history=[MemberHistoryEntry(date=today.isoformat(), action="Enrolled")],
        )
        return self.save(member, context)

    def update_member(self, member_id: str, data: MemberUpdate, context: TenantContext) -> SaveResult[Member]:
        """
        Update member fields that were provided.

        A status change is also recorded in the member's history.

        Raises:
            NotFoundException: If member not found in this office
            ValidationException: If a required field is set to null
        """
        member = self.get(member_id, context)
        updated = self.apply_changes(member, data.model_dump(exclude_unset=True))

        if updated.status != member.status:
            updated.history.append(
                MemberHistoryEntry(
                    date=date.today().isoformat(),
                    action=f"Status changed to {updated.status.value}",
                )
            )

        return self.save(updated, context)
