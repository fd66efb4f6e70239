"""Caller value object.

Identity of the authenticated principal making a request, as recovered
from a validated session token. The application layer receives a Caller
(or None for anonymous requests) and never reads tokens itself.
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class Caller:
    """Authenticated principal.

    Attributes:
        user_id: Subject of the token.
        email: Email claim.
        role: Role claim resolved to a known role, None when unrecognised.
        name: Display name claim.
    """

    user_id: UUID
    email: str
    role: UserRole | None
    name: str = field(default="")

    def has_role(self, *roles: UserRole) -> bool:
        return self.role is not None and self.role in roles
