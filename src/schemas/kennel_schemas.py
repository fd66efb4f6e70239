"""Kennel request/response schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field

from src.domain.entities import Kennel
from src.domain.types import Money


class KennelCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Suite A"])
    size: str = Field(..., min_length=1, max_length=20, examples=["Large"])
    is_available: bool = True
    price_per_day: Money = Decimal("0")


class KennelUpdateRequest(KennelCreateRequest):
    id: int


class KennelResponse(BaseModel):
    id: int
    name: str
    size: str
    is_available: bool
    price_per_day: Decimal

    @classmethod
    def from_entity(cls, kennel: Kennel) -> "KennelResponse":
        return cls(
            id=kennel.id or 0,
            name=kennel.name,
            size=kennel.size,
            is_available=kennel.is_available,
            price_per_day=kennel.price_per_day,
        )
