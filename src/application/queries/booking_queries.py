"""Booking queries."""

from dataclasses import dataclass

from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class ListBookings:
    """List bookings; Customer callers only see bookings for their dogs."""

    caller: Caller | None


@dataclass(frozen=True, kw_only=True)
class GetBooking:
    caller: Caller | None
    booking_id: int
