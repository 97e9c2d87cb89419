from union_office.models.user import User
from union_office.repositories.storage import StorageAdapter, StorageKeys


class SessionRepository:
    """Repository for the single current-session slot"""

    def __init__(self, storage: StorageAdapter):
        self.storage = storage

    def get_current(self) -> User | None:
        raw = self.storage.read_one(StorageKeys.SESSION)
        return User.model_validate(raw) if raw else None

    def set_current(self, user: User) -> None:
        """Persist the session user; the password is never written"""
        self.storage.write_one(StorageKeys.SESSION, user.model_dump(mode="json", exclude={"password"}))

    def clear(self) -> None:
        self.storage.remove(StorageKeys.SESSION)
