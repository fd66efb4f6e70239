"""Customer request/response schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import Customer
from src.domain.types import Email


class CustomerCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Jane Doe"])
    email: Email
    phone: str = Field(default="", max_length=50, examples=["555-0100"])
    user_id: UUID | None = Field(
        default=None, description="Login account to link, if any"
    )


class CustomerUpdateRequest(CustomerCreateRequest):
    """Full replacement; ``id`` must match the path id.

    Omitting user_id keeps the current account link.
    """

    id: int


class CustomerResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    user_id: UUID | None = None

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id or 0,
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            user_id=customer.user_id,
        )
