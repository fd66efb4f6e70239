"""Database connection and session management.

Wraps SQLAlchemy's async engine and session factory. PostgreSQL (asyncpg)
is the deployment target; SQLite (aiosqlite) serves local runs and tests.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool


class Database:
    """Database connection and session management.

    Usage:
        db = Database("sqlite+aiosqlite:///./kennel.db")
        await db.create_all()
        async with db.get_session() as session:
            ...  # commits on success, rolls back on error
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 5,
    ) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: Async SQLAlchemy URL.
            echo: Log all SQL statements.
            pool_size: Pooled connections (server databases only).
            max_overflow: Extra connections above pool_size.
        """
        self.is_sqlite = database_url.startswith("sqlite")
        engine_kwargs: dict[str, Any] = {"echo": echo}

        if self.is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            # In-memory databases live and die with their connection
            if ":memory:" in database_url or database_url.rstrip("/").endswith(
                "sqlite+aiosqlite:"
            ):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                pool_pre_ping=True,
                pool_size=pool_size,
                max_overflow=max_overflow,
            )

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        if self.is_sqlite:
            # SQLite ignores ON DELETE clauses unless foreign keys are enabled
            @event.listens_for(self.engine.sync_engine, "connect")
            def _enable_foreign_keys(dbapi_connection: Any, _: Any) -> None:
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional database session.

        Commits on successful exit, rolls back on exception, always closes.

        Yields:
            AsyncSession: Database session for operations.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create all tables defined in the models."""
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables. Tests only."""
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Check if the database answers a trivial query."""
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
                return True
        except Exception:
            return False
