"""Unit tests for KennelApiClient using pytest-httpx."""

import json
from datetime import UTC, datetime, timedelta

import httpx
import jwt
import pytest

from src.client import ApiError, InMemorySessionStorage, KennelApiClient, SessionContext
from src.core.result import Failure, Success

BASE_URL = "http://kennel.test/api"


def _token() -> str:
    return jwt.encode(
        {
            "sub": "user-1",
            "roles": ["Staff"],
            "exp": int((datetime.now(UTC) + timedelta(hours=1)).timestamp()),
        },
        "client-side-tests-do-not-verify-this-key",
        algorithm="HS256",
    )


@pytest.fixture
def session() -> SessionContext:
    return SessionContext(storage=InMemorySessionStorage())


@pytest.fixture
async def client(session):
    async with KennelApiClient(BASE_URL, session=session) as api:
        yield api


@pytest.mark.unit
class TestLogin:
    async def test_login_stores_session(self, client, session, httpx_mock):
        # Arrange
        token = _token()
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/auth/login",
            json={"token": token, "email": "staff@kennel.com", "role": "Staff"},
        )

        # Act
        result = await client.login("staff@kennel.com", "Staff123!")

        # Assert
        assert isinstance(result, Success)
        assert session.token == token
        assert session.is_in_role("Staff")
        sent = httpx_mock.get_requests()[0]
        assert json.loads(sent.content) == {
            "email": "staff@kennel.com",
            "password": "Staff123!",
        }

    async def test_failed_login_returns_server_message(self, client, session, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/auth/login",
            status_code=401,
            json={"error": "Incorrect password. Please try again."},
        )

        result = await client.login("staff@kennel.com", "wrong")

        assert result == Failure(
            error=ApiError(status_code=401, message="Incorrect password. Please try again.")
        )
        assert session.is_authenticated is False

    async def test_register_returns_message(self, client, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/auth/register",
            json={"message": "Account created successfully!"},
        )

        result = await client.register(
            email="new@kennel.com",
            password="Secret1",
            first_name="New",
            last_name="Owner",
        )

        assert result == Success(value="Account created successfully!")


@pytest.mark.unit
class TestResourceRequests:
    async def test_bearer_token_is_sent(self, client, session, httpx_mock):
        token = _token()
        session.login(token, "staff@kennel.com", "Staff")
        httpx_mock.add_response(method="GET", url=f"{BASE_URL}/dogs", json=[])

        result = await client.dogs.list()

        assert result == Success(value=[])
        request = httpx_mock.get_requests()[0]
        assert request.headers["Authorization"] == f"Bearer {token}"

    async def test_anonymous_request_has_no_authorization(self, client, httpx_mock):
        httpx_mock.add_response(method="GET", url=f"{BASE_URL}/kennels/3", json={"id": 3})

        await client.kennels.get(3)

        assert "Authorization" not in httpx_mock.get_requests()[0].headers

    async def test_update_puts_id_in_body(self, client, httpx_mock):
        httpx_mock.add_response(method="PUT", url=f"{BASE_URL}/dogs/4", status_code=204)

        result = await client.dogs.update(4, {"name": "Rex", "breed": "Lab", "age": 3})

        assert result == Success(value=None)
        body = json.loads(httpx_mock.get_requests()[0].content)
        assert body["id"] == 4

    async def test_change_role(self, client, httpx_mock):
        httpx_mock.add_response(
            method="PUT", url=f"{BASE_URL}/users/abc/role", status_code=204
        )

        result = await client.users.change_role("abc", "Admin")

        assert result == Success(value=None)
        assert json.loads(httpx_mock.get_requests()[0].content) == {"role": "Admin"}

    async def test_unauthorized_response_logs_out(self, client, session, httpx_mock):
        session.login(_token(), "staff@kennel.com", "Staff")
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/bookings",
            status_code=401,
            json={"error": "Session has expired. Please login again."},
        )

        result = await client.bookings.list()

        assert isinstance(result, Failure)
        assert result.error.status_code == 401
        assert session.is_authenticated is False

    async def test_forbidden_keeps_session(self, client, session, httpx_mock):
        session.login(_token(), "c@kennel.com", "Customer")
        httpx_mock.add_response(
            method="DELETE",
            url=f"{BASE_URL}/dogs/1",
            status_code=403,
            json={"error": "You do not have permission to delete dogs."},
        )

        result = await client.dogs.delete(1)

        assert result == Failure(
            error=ApiError(
                status_code=403, message="You do not have permission to delete dogs."
            )
        )
        assert session.is_authenticated is True

    async def test_non_json_error_body(self, client, httpx_mock):
        httpx_mock.add_response(
            method="GET", url=f"{BASE_URL}/customers", status_code=500, text="boom"
        )

        result = await client.customers.list()

        assert isinstance(result, Failure)
        assert result.error.status_code == 500
        assert result.error.message == "Internal Server Error"

    async def test_unreachable_server(self, client, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        result = await client.kennels.list()

        assert result == Failure(error=ApiError(status_code=0, message="connection refused"))
