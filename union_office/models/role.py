"""Office role enum for role-based access control."""

from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    """
    Office roles with hierarchical permissions.

    Role Hierarchy (highest to lowest):
    1. OWNER - First registrant of the office, full control
    2. ADMIN - Manage data and read the activity log
    3. OPERATOR - Create/edit/delete members, cases, events and documents
    4. VIEWER - Read-only access to all office data

    The stored strings are stable and must not change, since they are
    persisted inside user records.
    """

    OWNER = "owner"
    ADMIN = "admin"
    OPERATOR = "operator"
    VIEWER = "viewer"
