"""BookingRepository - SQLAlchemy implementation of BookingRepository protocol."""

from collections.abc import Iterable
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.booking import Booking
from src.infrastructure.persistence.models.booking import Booking as BookingModel


def _to_naive_utc(value: datetime) -> datetime:
    """Booking dates are stored as naive UTC timestamps."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class BookingRepository:
    """SQLAlchemy implementation of BookingRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, booking_id: int) -> Booking | None:
        model = await self.session.get(BookingModel, booking_id)
        return self._to_domain(model) if model is not None else None

    async def list_all(self) -> list[Booking]:
        result = await self.session.execute(
            select(BookingModel).order_by(BookingModel.id)
        )
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_dog_ids(self, dog_ids: Iterable[int]) -> list[Booking]:
        ids = list(dog_ids)
        if not ids:
            return []
        stmt = (
            select(BookingModel)
            .where(BookingModel.dog_id.in_(ids))
            .order_by(BookingModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, booking: Booking) -> Booking:
        model = BookingModel(
            dog_id=booking.dog_id,
            kennel_id=booking.kennel_id,
            check_in_date=_to_naive_utc(booking.check_in_date),
            check_out_date=_to_naive_utc(booking.check_out_date),
            total_cost=booking.total_cost,
            status=booking.status,
        )
        self.session.add(model)
        await self.session.flush()
        return self._to_domain(model)

    async def update(self, booking: Booking) -> Booking:
        """Copy fields onto the stored row.

        Raises:
            ValueError: If the booking does not exist.
        """
        model = await self.session.get(BookingModel, booking.id)
        if model is None:
            raise ValueError(f"Booking {booking.id} not found")

        model.dog_id = booking.dog_id
        model.kennel_id = booking.kennel_id
        model.check_in_date = _to_naive_utc(booking.check_in_date)
        model.check_out_date = _to_naive_utc(booking.check_out_date)
        model.total_cost = booking.total_cost
        model.status = booking.status
        await self.session.flush()
        return self._to_domain(model)

    async def delete(self, booking_id: int) -> None:
        await self.session.execute(
            delete(BookingModel).where(BookingModel.id == booking_id)
        )
        await self.session.flush()

    def _to_domain(self, model: BookingModel) -> Booking:
        return Booking(
            id=model.id,
            dog_id=model.dog_id,
            kennel_id=model.kennel_id,
            check_in_date=model.check_in_date,
            check_out_date=model.check_out_date,
            total_cost=Decimal(model.total_cost),
            status=model.status,
        )
