"""Permission components for RBAC authorization.

Permissions are (resource, action) pairs such as ``dogs:update``. The grant
table itself lives in the Casbin policy file; these enums keep callers from
passing free-form strings.

Usage:
    from src.domain.enums import Action, Resource

    result = await access_policy.authorize(caller, Resource.DOGS, Action.READ)
"""

from enum import Enum


class Resource(str, Enum):
    """Entity types protected by the access policy."""

    CUSTOMERS = "customers"
    DOGS = "dogs"
    KENNELS = "kennels"
    BOOKINGS = "bookings"
    USERS = "users"

    @classmethod
    def values(cls) -> list[str]:
        return [resource.value for resource in cls]


class Action(str, Enum):
    """Operations a caller can request on a resource.

    Action Semantics:
        LIST: collection read (may be narrowed to an owned subset)
        READ: single record read
        CREATE, UPDATE, DELETE: mutations
    """

    LIST = "list"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def values(cls) -> list[str]:
        return [action.value for action in cls]


class AccessDecision(str, Enum):
    """Outcome of a role-matrix lookup.

    ALLOW_WITH_SCOPE means the caller may act only on records reachable
    through their own Customer profile.
    """

    ALLOW = "allow"
    DENY = "deny"
    ALLOW_WITH_SCOPE = "allow_with_scope"
