"""DogRepository protocol for dog persistence."""

from typing import Protocol

from src.domain.entities.dog import Dog


class DogRepository(Protocol):
    """Dog repository protocol (port)."""

    async def find_by_id(self, dog_id: int) -> Dog | None: ...

    async def list_all(self) -> list[Dog]: ...

    async def list_by_customer(self, customer_id: int) -> list[Dog]:
        """Return the dogs owned by one customer."""
        ...

    async def list_ids_by_customer(self, customer_id: int) -> list[int]:
        """Return only the ids of the dogs owned by one customer.

        Used to resolve the ownership scope without loading full rows.
        """
        ...

    async def count_by_customer(self, customer_id: int) -> int: ...

    async def save(self, dog: Dog) -> Dog: ...

    async def update(self, dog: Dog) -> Dog: ...

    async def delete(self, dog_id: int) -> None:
        """Delete a dog and, through the store cascade, its bookings."""
        ...
