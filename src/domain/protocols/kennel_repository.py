"""KennelRepository protocol for kennel persistence."""

from typing import Protocol

from src.domain.entities.kennel import Kennel


class KennelRepository(Protocol):
    """Kennel repository protocol (port)."""

    async def find_by_id(self, kennel_id: int) -> Kennel | None: ...

    async def list_all(self) -> list[Kennel]: ...

    async def save(self, kennel: Kennel) -> Kennel: ...

    async def update(self, kennel: Kennel) -> Kennel: ...

    async def delete(self, kennel_id: int) -> None:
        """Delete a kennel and, through the store cascade, its bookings."""
        ...
