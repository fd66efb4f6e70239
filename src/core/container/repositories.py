"""Repository dependency factories.

Request-scoped repository instances sharing the request's session, so
every write in a request commits or rolls back together.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        BookingRepository,
        CustomerRepository,
        DogRepository,
        KennelRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Usage:
        user_repo: UserRepository = Depends(get_user_repository)
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_customer_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "CustomerRepository":
    from src.infrastructure.persistence.repositories import CustomerRepository

    return CustomerRepository(session=session)


async def get_dog_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "DogRepository":
    from src.infrastructure.persistence.repositories import DogRepository

    return DogRepository(session=session)


async def get_kennel_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "KennelRepository":
    from src.infrastructure.persistence.repositories import KennelRepository

    return KennelRepository(session=session)


async def get_booking_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "BookingRepository":
    from src.infrastructure.persistence.repositories import BookingRepository

    return BookingRepository(session=session)
