"""End-to-end: the Python client against the real application."""

import httpx
import pytest

from src.client import InMemorySessionStorage, KennelApiClient, SessionContext
from src.core.result import Failure, Success


@pytest.fixture
async def api(app):
    session = SessionContext(storage=InMemorySessionStorage())
    async with KennelApiClient(
        "http://test/api",
        session=session,
        transport=httpx.ASGITransport(app=app),
    ) as kennel_api:
        yield kennel_api


@pytest.mark.api
class TestClientAgainstApp:
    async def test_customer_session_flow(self, api):
        # Login
        login = await api.login("customer@kennel.com", "Customer123!")
        assert isinstance(login, Success)
        assert api.session.is_in_role("Customer")

        # Register a dog, then list
        created = await api.dogs.create({"name": "Biscuit", "breed": "Beagle", "age": 2})
        listed = await api.dogs.list()
        assert isinstance(created, Success)
        assert listed == Success(value=[created.value])

        # Forbidden does not end the session
        kennels = await api.kennels.list()
        assert isinstance(kennels, Failure)
        assert kennels.error.status_code == 403
        assert api.session.is_authenticated is True

    async def test_rejected_token_ends_session(self, api):
        api.session.login("not-a-real-token", "ghost@kennel.com", "Admin")

        result = await api.dogs.list()

        assert isinstance(result, Failure)
        assert result.error.status_code == 401
        assert api.session.is_authenticated is False

    async def test_anonymous_register(self, api):
        result = await api.register(
            email="fresh@kennel.com",
            password="Secret1",
            first_name="Fresh",
            last_name="Face",
        )

        assert isinstance(result, Success)
        assert "fresh@kennel.com" in result.value
