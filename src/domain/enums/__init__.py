"""Domain enums.

Usage:
    from src.domain.enums import UserRole, Resource, Action, AccessDecision
"""

from src.domain.enums.permission import AccessDecision, Action, Resource
from src.domain.enums.user_role import UserRole

__all__ = [
    "AccessDecision",
    "Action",
    "Resource",
    "UserRole",
]
