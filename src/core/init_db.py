#!/usr/bin/env python3
"""Database initialization.

- Creates all tables from the SQLAlchemy models (idempotent)
- Optionally seeds demo accounts for each role (idempotent)

Called by the FastAPI lifespan at startup and runnable on its own:

    python -m src.core.init_db
"""

import asyncio
from dataclasses import dataclass

from src.core.config import settings
from src.core.result import Failure
from src.domain.protocols import LoggerProtocol, PasswordHashingProtocol
from src.infrastructure.persistence.database import Database


@dataclass(frozen=True, kw_only=True)
class DemoAccount:
    email: str
    password: str
    first_name: str
    last_name: str
    role: str


DEMO_ACCOUNTS: tuple[DemoAccount, ...] = (
    DemoAccount(
        email="admin@kennel.com",
        password="Admin123!",
        first_name="Admin",
        last_name="User",
        role="Admin",
    ),
    DemoAccount(
        email="staff@kennel.com",
        password="Staff123!",
        first_name="Staff",
        last_name="Member",
        role="Staff",
    ),
    DemoAccount(
        email="customer@kennel.com",
        password="Customer123!",
        first_name="Demo",
        last_name="Customer",
        role="Customer",
    ),
)


async def seed_demo_users(
    database: Database,
    password_service: PasswordHashingProtocol,
    logger: LoggerProtocol,
) -> int:
    """Create the demo accounts that do not exist yet.

    The Customer account gets its linked customer profile through normal
    provisioning.

    Returns:
        Number of accounts created.
    """
    from src.application.services.user_provisioning import UserProvisioner
    from src.infrastructure.persistence.repositories import (
        CustomerRepository,
        UserRepository,
    )

    created = 0
    async with database.get_session() as session:
        user_repo = UserRepository(session=session)
        provisioner = UserProvisioner(
            user_repo=user_repo,
            customer_repo=CustomerRepository(session=session),
            password_service=password_service,
            logger=logger,
        )
        for account in DEMO_ACCOUNTS:
            if await user_repo.find_by_email(account.email) is not None:
                continue
            result = await provisioner.provision(
                email=account.email,
                password=account.password,
                first_name=account.first_name,
                last_name=account.last_name,
                role_name=account.role,
            )
            if isinstance(result, Failure):
                logger.warning(
                    "demo_user_seed_failed",
                    email=account.email,
                    reason=result.error.message,
                )
                continue
            created += 1

    logger.info("demo_users_seeded", created=created)
    return created


async def init_database(
    database: Database,
    password_service: PasswordHashingProtocol,
    logger: LoggerProtocol,
    seed: bool = False,
) -> None:
    """Create tables and, when requested, seed demo accounts."""
    await database.create_all()
    logger.info("database_tables_ready")

    if seed:
        await seed_demo_users(database, password_service, logger)


async def main() -> int:
    from src.core.container import get_database, get_logger, get_password_service

    logger = get_logger()
    database = get_database()
    try:
        if not await database.check_connection():
            logger.error("database_unreachable")
            return 1
        await init_database(
            database,
            get_password_service(),
            logger,
            seed=settings.seed_demo_users,
        )
    finally:
        await database.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
