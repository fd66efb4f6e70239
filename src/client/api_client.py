"""HTTP client for the kennel API.

Wraps a single httpx.AsyncClient. Every request carries the session's
bearer token, and every call returns a Result: Success with the decoded
body, or Failure(ApiError) with the server's ``{"error": ...}`` message
and status code. A 401 response ends the local session.

Usage:
    async with KennelApiClient("http://localhost:8000/api", session=session) as api:
        match await api.login("owner@kennel.com", "Secret1"):
            case Success(value=state):
                ...
        created = await api.dogs.create({"name": "Rex", "breed": "Lab", "age": 3})
"""

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from src.client.session import SessionContext, SessionState
from src.core.constants import BEARER_PREFIX, ERROR_BODY_KEY, HTTP_CLIENT_TIMEOUT_SECONDS
from src.core.result import Failure, Result, Success

logger = structlog.get_logger("kennel_client.api")


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiError:
    """Failed API call.

    Attributes:
        status_code: HTTP status, 0 when the server was unreachable.
        message: Server error message or transport error description.
    """

    status_code: int
    message: str


def _error_from_response(response: httpx.Response) -> ApiError:
    message = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get(ERROR_BODY_KEY), str):
        message = body[ERROR_BODY_KEY]
    return ApiError(status_code=response.status_code, message=message)


class ResourceEndpoint:
    """List/get/create/update/delete for one resource collection.

    Update sends the id in the body as well as the path, as the server
    requires.
    """

    def __init__(self, client: "KennelApiClient", resource: str) -> None:
        self._client = client
        self._resource = resource

    async def list(self) -> Result[list[dict[str, Any]], ApiError]:
        return await self._client.request("GET", f"/{self._resource}")

    async def get(self, record_id: Any) -> Result[dict[str, Any], ApiError]:
        return await self._client.request("GET", f"/{self._resource}/{record_id}")

    async def create(self, payload: dict[str, Any]) -> Result[dict[str, Any], ApiError]:
        return await self._client.request("POST", f"/{self._resource}", json=payload)

    async def update(
        self, record_id: Any, payload: dict[str, Any]
    ) -> Result[None, ApiError]:
        body = {**payload, "id": record_id}
        return await self._client.request(
            "PUT", f"/{self._resource}/{record_id}", json=body
        )

    async def delete(self, record_id: Any) -> Result[None, ApiError]:
        return await self._client.request("DELETE", f"/{self._resource}/{record_id}")


class UsersEndpoint(ResourceEndpoint):
    async def change_role(self, user_id: Any, role: str) -> Result[None, ApiError]:
        return await self._client.request(
            "PUT", f"/users/{user_id}/role", json={"role": role}
        )


class KennelApiClient:
    """Async client bound to one SessionContext.

    Args:
        base_url: API root including the prefix, e.g. "http://host/api".
        session: Session providing (and receiving) the bearer token.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (ASGITransport in tests).
    """

    def __init__(
        self,
        base_url: str,
        *,
        session: SessionContext,
        timeout: float = HTTP_CLIENT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._session = session
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )
        self.customers = ResourceEndpoint(self, "customers")
        self.dogs = ResourceEndpoint(self, "dogs")
        self.kennels = ResourceEndpoint(self, "kennels")
        self.bookings = ResourceEndpoint(self, "bookings")
        self.users = UsersEndpoint(self, "users")

    @property
    def session(self) -> SessionContext:
        return self._session

    async def __aenter__(self) -> "KennelApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        token = self._session.token
        if token is None:
            return {}
        return {"Authorization": f"{BEARER_PREFIX}{token}"}

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> Result[Any, ApiError]:
        """Send a request with the current bearer token.

        Returns:
            Success with the decoded JSON body (None for empty bodies), or
            Failure(ApiError).
        """
        try:
            response = await self._http.request(
                method, path, json=json, headers=self._headers()
            )
        except httpx.HTTPError as e:
            logger.warning("api_unreachable", method=method, path=path, error=str(e))
            return Failure(error=ApiError(status_code=0, message=str(e) or type(e).__name__))

        if response.is_success:
            if not response.content:
                return Success(value=None)
            return Success(value=response.json())

        error = _error_from_response(response)
        logger.info(
            "api_request_failed",
            method=method,
            path=path,
            status_code=error.status_code,
        )
        if response.status_code == httpx.codes.UNAUTHORIZED and self._session.is_authenticated:
            self._session.logout()
        return Failure(error=error)

    async def register(
        self,
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role: str = "Customer",
    ) -> Result[str, ApiError]:
        """Create an account; returns the server's confirmation message."""
        result = await self.request(
            "POST",
            "/auth/register",
            json={
                "email": email,
                "password": password,
                "first_name": first_name,
                "last_name": last_name,
                "role": role,
            },
        )
        match result:
            case Success(value=body):
                return Success(value=body["message"])
            case _:
                return result

    async def login(self, email: str, password: str) -> Result[SessionState, ApiError]:
        """Log in and store the issued token in the session."""
        result = await self.request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        match result:
            case Success(value=body):
                state = self._session.login(body["token"], body["email"], body["role"])
                return Success(value=state)
            case _:
                return result

    def logout(self) -> None:
        """Forget the token locally; the server keeps no session state."""
        self._session.logout()
