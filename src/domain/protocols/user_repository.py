"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Returns:
            User if found, None otherwise.
        """
        ...

    async def list_all(self) -> list[User]:
        """Return every user ordered by email."""
        ...

    async def save(self, user: User) -> None:
        """Insert a new user."""
        ...

    async def update(self, user: User) -> None:
        """Persist changes to an existing user."""
        ...

    async def delete(self, user_id: UUID) -> None:
        """Remove a user permanently."""
        ...
