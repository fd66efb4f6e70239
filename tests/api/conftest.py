"""Fixtures for API tests.

Each test gets the real application over httpx's ASGI transport with
request sessions pointed at a fresh in-memory SQLite database holding
the three demo accounts (admin, staff, customer).
"""

from collections.abc import AsyncGenerator, Awaitable, Callable

import httpx
import pytest
from fastapi import FastAPI

from src.core.container import get_db_session, get_logger, get_password_service
from src.core.init_db import seed_demo_users
from src.infrastructure.persistence.database import Database
from src.main import create_app

ADMIN = ("admin@kennel.com", "Admin123!")
STAFF = ("staff@kennel.com", "Staff123!")
CUSTOMER = ("customer@kennel.com", "Customer123!")


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    db = Database("sqlite+aiosqlite://")
    await db.create_all()
    await seed_demo_users(db, get_password_service(), get_logger())
    yield db
    await db.close()


@pytest.fixture
def app(database) -> FastAPI:
    application = create_app()

    async def override_db_session():
        async with database.get_session() as session:
            yield session

    application.dependency_overrides[get_db_session] = override_db_session
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


LoginFn = Callable[[tuple[str, str]], Awaitable[dict[str, str]]]


@pytest.fixture
def login(client) -> LoginFn:
    """Log in and return Authorization headers."""

    async def _login(credentials: tuple[str, str]) -> dict[str, str]:
        email, password = credentials
        response = await client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@pytest.fixture
async def admin_headers(login) -> dict[str, str]:
    return await login(ADMIN)


@pytest.fixture
async def staff_headers(login) -> dict[str, str]:
    return await login(STAFF)


@pytest.fixture
async def customer_headers(login) -> dict[str, str]:
    return await login(CUSTOMER)
