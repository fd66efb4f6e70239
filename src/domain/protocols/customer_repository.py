"""CustomerRepository protocol for customer persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.customer import Customer


class CustomerRepository(Protocol):
    """Customer repository protocol (port).

    ``save`` assigns the store identifier and returns the stored entity.
    """

    async def find_by_id(self, customer_id: int) -> Customer | None: ...

    async def find_by_user_id(self, user_id: UUID) -> Customer | None:
        """Find the customer profile linked to a login account.

        Returns:
            Customer if the user has a profile, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Customer | None: ...

    async def list_all(self) -> list[Customer]: ...

    async def save(self, customer: Customer) -> Customer: ...

    async def update(self, customer: Customer) -> Customer: ...

    async def delete(self, customer_id: int) -> None: ...
