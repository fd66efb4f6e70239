"""BookingRepository protocol for booking persistence."""

from collections.abc import Iterable
from typing import Protocol

from src.domain.entities.booking import Booking


class BookingRepository(Protocol):
    """Booking repository protocol (port)."""

    async def find_by_id(self, booking_id: int) -> Booking | None: ...

    async def list_all(self) -> list[Booking]: ...

    async def list_by_dog_ids(self, dog_ids: Iterable[int]) -> list[Booking]:
        """Return bookings for any of the given dogs.

        An empty ``dog_ids`` yields an empty list without querying.
        """
        ...

    async def save(self, booking: Booking) -> Booking: ...

    async def update(self, booking: Booking) -> Booking: ...

    async def delete(self, booking_id: int) -> None: ...
