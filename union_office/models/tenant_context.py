"""Tenant context for request authorization."""

from dataclasses import dataclass
from union_office.models.user import User
from union_office.models.role import UserRole


@dataclass
class TenantContext:
    """
    Acting user plus the office they act in.

    Built from the JWT and verified against the stored user record. Every
    store operation takes one of these; its sede_id is the only tenant a
    request can read from or write to.

    Attributes:
        user: The authenticated User (password stripped)
    """

    user: User

    @property
    def sede_id(self) -> str:
        return self.user.sede_id

    @property
    def role(self) -> UserRole:
        return self.user.role

    def has_permission(self, required_role: UserRole) -> bool:
        """
        Check if user's role meets or exceeds required role.

        Role hierarchy: OWNER (4) > ADMIN (3) > OPERATOR (2) > VIEWER (1)

        Args:
            required_role: Minimum role required for the operation

        Returns:
            True if user has sufficient permissions
        """
        role_hierarchy = {
            UserRole.OWNER: 4,
            UserRole.ADMIN: 3,
            UserRole.OPERATOR: 2,
            UserRole.VIEWER: 1,
        }
        return role_hierarchy[self.role] >= role_hierarchy[required_role]

    def is_owner(self) -> bool:
        """Check if user is the office owner."""
        return self.role == UserRole.OWNER

    def is_admin_or_higher(self) -> bool:
        """Check if user is admin or owner."""
        return self.role in (UserRole.OWNER, UserRole.ADMIN)

    def can_write(self) -> bool:
        """Check if user has write permissions (OPERATOR or higher)."""
        return self.has_permission(UserRole.OPERATOR)

    def __repr__(self) -> str:
        return f"<TenantContext(user_id={self.user.id}, sede_id={self.sede_id}, role={self.role.value})>"
