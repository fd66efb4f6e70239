"""User management schemas (Admin only).

Password hashes are never part of a response.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import User
from src.domain.types import Email, PersonName


class UserCreateRequest(BaseModel):
    email: Email
    password: str = Field(..., max_length=128)
    first_name: PersonName
    last_name: PersonName
    role: str = Field(..., examples=["Staff"])


class UserUpdateRequest(BaseModel):
    id: UUID
    first_name: PersonName
    last_name: PersonName
    email: Email
    role: str | None = Field(default=None, description="New role, or omit to keep")


class UserRoleRequest(BaseModel):
    role: str = Field(..., examples=["Admin"])


class UserResponse(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    role: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=user.role.value,
        )
