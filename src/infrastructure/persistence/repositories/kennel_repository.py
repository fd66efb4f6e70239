"""KennelRepository - SQLAlchemy implementation of KennelRepository protocol."""

from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.kennel import Kennel
from src.infrastructure.persistence.models.booking import Booking as BookingModel
from src.infrastructure.persistence.models.kennel import Kennel as KennelModel


class KennelRepository:
    """SQLAlchemy implementation of KennelRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, kennel_id: int) -> Kennel | None:
        model = await self.session.get(KennelModel, kennel_id)
        return self._to_domain(model) if model is not None else None

    async def list_all(self) -> list[Kennel]:
        result = await self.session.execute(
            select(KennelModel).order_by(KennelModel.id)
        )
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, kennel: Kennel) -> Kennel:
        model = KennelModel(
            name=kennel.name,
            size=kennel.size,
            is_available=kennel.is_available,
            price_per_day=kennel.price_per_day,
        )
        self.session.add(model)
        await self.session.flush()
        return self._to_domain(model)

    async def update(self, kennel: Kennel) -> Kennel:
        """Copy fields onto the stored row.

        Raises:
            ValueError: If the kennel does not exist.
        """
        model = await self.session.get(KennelModel, kennel.id)
        if model is None:
            raise ValueError(f"Kennel {kennel.id} not found")

        model.name = kennel.name
        model.size = kennel.size
        model.is_available = kennel.is_available
        model.price_per_day = kennel.price_per_day
        await self.session.flush()
        return self._to_domain(model)

    async def delete(self, kennel_id: int) -> None:
        await self.session.execute(
            delete(BookingModel).where(BookingModel.kennel_id == kennel_id)
        )
        await self.session.execute(
            delete(KennelModel).where(KennelModel.id == kennel_id)
        )
        await self.session.flush()

    def _to_domain(self, model: KennelModel) -> Kennel:
        return Kennel(
            id=model.id,
            name=model.name,
            size=model.size,
            is_available=model.is_available,
            price_per_day=Decimal(model.price_per_day),
        )
