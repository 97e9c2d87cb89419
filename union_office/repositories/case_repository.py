from union_office.models.case import Case, CaseStatus
from union_office.repositories.collection_repository import CollectionRepository
from union_office.repositories.storage import StorageKeys


class CaseRepository(CollectionRepository[Case]):
    """Repository for Case records"""

    key = StorageKeys.CASES
    model = Case

    def get_with_filters(
        self,
        sede_id: str,
        status: CaseStatus | None = None,
        member_id: str | None = None,
    ) -> list[Case]:
        """
        Get cases of the office, optionally narrowed by status and member.

        Args:
            sede_id: Office ID for isolation
            status: Optional status filter
            member_id: Optional member filter

        Returns:
            Matching cases in insertion order
        """
        cases = self.get_by_tenant(sede_id)
        if status is not None:
            cases = [c for c in cases if c.status == status]
        if member_id is not None:
            cases = [c for c in cases if c.member_id == member_id]
        return cases
