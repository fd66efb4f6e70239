"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    Writes are flushed, not committed; the request session commits once
    the whole operation succeeds.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("admin@kennel.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self.session.get(UserModel, user_id)
        return self._to_domain(model) if model is not None else None

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address, ignoring case."""
        stmt = select(UserModel).where(
            func.lower(UserModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.email)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, user: User) -> None:
        self.session.add(self._to_model(user))
        await self.session.flush()

    async def update(self, user: User) -> None:
        """Copy mutable fields onto the stored row.

        Raises:
            ValueError: If the user does not exist.
        """
        model = await self.session.get(UserModel, user.id)
        if model is None:
            raise ValueError(f"User {user.id} not found")

        model.first_name = user.first_name
        model.last_name = user.last_name
        model.email = user.email
        model.password_hash = user.password_hash
        model.role = user.role.value
        await self.session.flush()

    async def delete(self, user_id: UUID) -> None:
        await self.session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self.session.flush()

    def _to_domain(self, model: UserModel) -> User:
        # Unknown role strings in the table fall back to the least privileged role
        role = UserRole.parse(model.role) or UserRole.CUSTOMER
        return User(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            password_hash=model.password_hash,
            role=role,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            password_hash=entity.password_hash,
            role=entity.role.value,
        )
