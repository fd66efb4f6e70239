"""User roles for RBAC authorization.

Every user holds exactly one role. Role names are the capitalized strings
stored in the database, carried in token claims and used as Casbin
subjects.

Roles:
    - Admin: full access to every resource, including user management
    - Staff: day-to-day operations on customers, dogs, kennels and bookings
    - Customer: access limited to their own profile, dogs and bookings

Usage:
    from src.domain.enums import UserRole

    role = UserRole.parse("Customer")
    if role is UserRole.CUSTOMER:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Closed set of roles known to the access policy."""

    ADMIN = "Admin"
    STAFF = "Staff"
    CUSTOMER = "Customer"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['Admin', 'Staff', 'Customer'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role name (case-insensitive)."""
        return cls.parse(value) is not None

    @classmethod
    def parse(cls, value: str | None) -> "UserRole | None":
        """Resolve a role name case-insensitively.

        Args:
            value: Role name as supplied by a client or token.

        Returns:
            The matching role, or None when the name is unknown.
        """
        if not value:
            return None
        lowered = value.strip().lower()
        for role in cls:
            if role.value.lower() == lowered:
                return role
        return None
