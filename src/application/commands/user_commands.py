"""User management commands (Admin only)."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create an account on someone's behalf.

    Same validation and Customer profile provisioning as registration.
    """

    caller: Caller | None
    email: str
    password: str
    first_name: str
    last_name: str
    role: str


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Edit name, email and optionally role.

    Attributes:
        user_id: Id from the request path.
        payload_id: Id from the request body; must equal user_id.
        role: New role name, or None to keep the current one.
    """

    caller: Caller | None
    user_id: UUID
    payload_id: UUID
    first_name: str
    last_name: str
    email: str
    role: str | None = None


@dataclass(frozen=True, kw_only=True)
class ChangeUserRole:
    caller: Caller | None
    user_id: UUID
    new_role: str


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Remove a user and their (dog-less) customer profile."""

    caller: Caller | None
    user_id: UUID
