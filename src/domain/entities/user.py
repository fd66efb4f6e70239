"""User domain entity.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import UserRole


@dataclass
class User:
    """Account that can log in to the kennel API.

    Business Rules:
        - Email is unique across users (case-insensitive)
        - Exactly one role per user
        - A Customer-role user normally owns one linked Customer profile

    Attributes:
        id: Unique user identifier (uuid7)
        first_name: Given name
        last_name: Family name
        email: Login email address
        password_hash: bcrypt hash (never plaintext)
        role: Assigned role
        created_at: Creation timestamp
        updated_at: Last modification timestamp
    """

    id: UUID
    first_name: str
    last_name: str
    email: str
    password_hash: str
    role: UserRole
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def display_name(self) -> str:
        """First and last name joined with a space."""
        return f"{self.first_name} {self.last_name}".strip()

    def change_role(self, role: UserRole) -> None:
        self.role = role
        self.updated_at = datetime.now(UTC)
