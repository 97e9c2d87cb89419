from union_office.models.member import Member
from union_office.repositories.collection_repository import CollectionRepository
from union_office.repositories.storage import StorageKeys


class MemberRepository(CollectionRepository[Member]):
    """Repository for Member records"""

    key = StorageKeys.MEMBERS
    model = Member

    def search(self, sede_id: str, term: str) -> list[Member]:
        """Members of the office whose name or tax code contains term (case-insensitive)"""
        needle = term.lower()
        return [
            m
            for m in self.get_by_tenant(sede_id)
            if needle in m.first_name.lower()
            or needle in m.last_name.lower()
            or needle in m.tax_code.lower()
        ]
