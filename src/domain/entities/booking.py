"""Booking domain entity."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

DEFAULT_BOOKING_STATUS = "Pending"


@dataclass
class Booking:
    """Reservation of a kennel for a dog over a date range.

    Business Rules:
        - dog_id and kennel_id must reference existing rows
        - check_out_date may not precede check_in_date

    Attributes:
        id: Store-assigned identifier (None until saved)
        dog_id: Boarded dog
        kennel_id: Reserved kennel
        check_in_date: Arrival
        check_out_date: Departure
        total_cost: Price agreed for the stay
        status: Free-text status, "Pending" for new bookings
    """

    dog_id: int
    kennel_id: int
    check_in_date: datetime
    check_out_date: datetime
    total_cost: Decimal = Decimal("0")
    status: str = DEFAULT_BOOKING_STATUS
    id: int | None = None

    def has_valid_dates(self) -> bool:
        return self.check_out_date >= self.check_in_date
