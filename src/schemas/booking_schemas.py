"""Booking request/response schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from src.domain.entities import Booking
from src.domain.entities.booking import DEFAULT_BOOKING_STATUS
from src.domain.types import Money


class BookingCreateRequest(BaseModel):
    dog_id: int
    kennel_id: int
    check_in_date: datetime
    check_out_date: datetime
    total_cost: Money = Decimal("0")
    status: str = Field(default=DEFAULT_BOOKING_STATUS, max_length=20)


class BookingUpdateRequest(BookingCreateRequest):
    id: int


class BookingResponse(BaseModel):
    id: int
    dog_id: int
    kennel_id: int
    check_in_date: datetime
    check_out_date: datetime
    total_cost: Decimal
    status: str

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id or 0,
            dog_id=booking.dog_id,
            kennel_id=booking.kennel_id,
            check_in_date=booking.check_in_date,
            check_out_date=booking.check_out_date,
            total_cost=booking.total_cost,
            status=booking.status,
        )
