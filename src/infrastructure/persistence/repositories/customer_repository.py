"""CustomerRepository - SQLAlchemy implementation of CustomerRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.customer import Customer
from src.infrastructure.persistence.models.customer import Customer as CustomerModel


class CustomerRepository:
    """SQLAlchemy implementation of CustomerRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, customer_id: int) -> Customer | None:
        model = await self.session.get(CustomerModel, customer_id)
        return self._to_domain(model) if model is not None else None

    async def find_by_user_id(self, user_id: UUID) -> Customer | None:
        stmt = select(CustomerModel).where(CustomerModel.user_id == user_id)
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model is not None else None

    async def find_by_email(self, email: str) -> Customer | None:
        stmt = select(CustomerModel).where(
            func.lower(CustomerModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model is not None else None

    async def list_all(self) -> list[Customer]:
        stmt = select(CustomerModel).order_by(CustomerModel.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, customer: Customer) -> Customer:
        model = CustomerModel(
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            user_id=customer.user_id,
        )
        self.session.add(model)
        await self.session.flush()
        return self._to_domain(model)

    async def update(self, customer: Customer) -> Customer:
        """Copy fields onto the stored row.

        Raises:
            ValueError: If the customer does not exist.
        """
        model = await self.session.get(CustomerModel, customer.id)
        if model is None:
            raise ValueError(f"Customer {customer.id} not found")

        model.name = customer.name
        model.email = customer.email
        model.phone = customer.phone
        model.user_id = customer.user_id
        await self.session.flush()
        return self._to_domain(model)

    async def delete(self, customer_id: int) -> None:
        await self.session.execute(
            delete(CustomerModel).where(CustomerModel.id == customer_id)
        )
        await self.session.flush()

    def _to_domain(self, model: CustomerModel) -> Customer:
        return Customer(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            user_id=model.user_id,
        )
