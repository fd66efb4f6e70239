"""Customer commands."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class CreateCustomer:
    """Create a customer record, optionally linked to a login account."""

    caller: Caller | None
    name: str
    email: str
    phone: str = ""
    user_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateCustomer:
    """Replace a customer's details.

    A None user_id keeps the existing link.
    """

    caller: Caller | None
    customer_id: int
    payload_id: int
    name: str
    email: str
    phone: str = ""
    user_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteCustomer:
    caller: Caller | None
    customer_id: int
