from union_office.models.record import TenantRecord
from union_office.models.role import UserRole


class User(TenantRecord):
    """
    Office user account.

    The password is stored and compared in plaintext. It is stripped before
    the record leaves the auth gate (session slot, API responses).
    """

    email: str
    password: str | None = None
    office_name: str
    operator_name: str
    role: UserRole = UserRole.OPERATOR

    def sanitized(self) -> "User":
        """Copy of the user without the password field"""
        return self.model_copy(update={"password": None})
