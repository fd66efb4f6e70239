"""Booking commands."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.domain.entities.booking import DEFAULT_BOOKING_STATUS
from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class CreateBooking:
    caller: Caller | None
    dog_id: int
    kennel_id: int
    check_in_date: datetime
    check_out_date: datetime
    total_cost: Decimal = Decimal("0")
    status: str = DEFAULT_BOOKING_STATUS


@dataclass(frozen=True, kw_only=True)
class UpdateBooking:
    caller: Caller | None
    booking_id: int
    payload_id: int
    dog_id: int
    kennel_id: int
    check_in_date: datetime
    check_out_date: datetime
    total_cost: Decimal = Decimal("0")
    status: str = DEFAULT_BOOKING_STATUS


@dataclass(frozen=True, kw_only=True)
class DeleteBooking:
    caller: Caller | None
    booking_id: int
