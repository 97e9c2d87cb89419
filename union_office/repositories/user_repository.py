from union_office.models.user import User
from union_office.repositories.collection_repository import CollectionRepository
from union_office.repositories.storage import StorageKeys


class UserRepository(CollectionRepository[User]):
    """Repository for User records (all offices share one collection)"""

    key = StorageKeys.USERS
    model = User

    def get_by_id(self, user_id: str) -> User | None:
        """Get user by id across all offices"""
        return next((u for u in self.get_all() if u.id == user_id), None)

    def get_by_email(self, email: str) -> User | None:
        """Get user by exact email"""
        return next((u for u in self.get_all() if u.email == email), None)

    def get_by_credentials(self, email: str, password: str) -> User | None:
        """
        Find the user whose email and password both match exactly.

        Passwords are stored in plaintext and compared as-is.
        """
        return next(
            (u for u in self.get_all() if u.email == email and u.password == password),
            None,
        )

    def create(self, user: User) -> User:
        """Append a new user; sede_id must already be resolved"""
        users, revision = self._load()
        users.append(user)
        self._store(users, revision)
        return user
