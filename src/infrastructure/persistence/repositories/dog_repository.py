"""DogRepository - SQLAlchemy implementation of DogRepository protocol."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.dog import Dog
from src.infrastructure.persistence.models.booking import Booking as BookingModel
from src.infrastructure.persistence.models.dog import Dog as DogModel


class DogRepository:
    """SQLAlchemy implementation of DogRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, dog_id: int) -> Dog | None:
        model = await self.session.get(DogModel, dog_id)
        return self._to_domain(model) if model is not None else None

    async def list_all(self) -> list[Dog]:
        result = await self.session.execute(select(DogModel).order_by(DogModel.id))
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_customer(self, customer_id: int) -> list[Dog]:
        stmt = (
            select(DogModel)
            .where(DogModel.customer_id == customer_id)
            .order_by(DogModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_ids_by_customer(self, customer_id: int) -> list[int]:
        stmt = select(DogModel.id).where(DogModel.customer_id == customer_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_customer(self, customer_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(DogModel)
            .where(DogModel.customer_id == customer_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def save(self, dog: Dog) -> Dog:
        model = DogModel(
            name=dog.name,
            breed=dog.breed,
            age=dog.age,
            customer_id=dog.customer_id,
        )
        self.session.add(model)
        await self.session.flush()
        return self._to_domain(model)

    async def update(self, dog: Dog) -> Dog:
        """Copy fields onto the stored row.

        Raises:
            ValueError: If the dog does not exist.
        """
        model = await self.session.get(DogModel, dog.id)
        if model is None:
            raise ValueError(f"Dog {dog.id} not found")

        model.name = dog.name
        model.breed = dog.breed
        model.age = dog.age
        model.customer_id = dog.customer_id
        await self.session.flush()
        return self._to_domain(model)

    async def delete(self, dog_id: int) -> None:
        # Explicit delete keeps the cascade working on databases without FK enforcement
        await self.session.execute(
            delete(BookingModel).where(BookingModel.dog_id == dog_id)
        )
        await self.session.execute(delete(DogModel).where(DogModel.id == dog_id))
        await self.session.flush()

    def _to_domain(self, model: DogModel) -> Dog:
        return Dog(
            id=model.id,
            name=model.name,
            breed=model.breed,
            age=model.age,
            customer_id=model.customer_id,
        )
