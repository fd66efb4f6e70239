"""Python client for the kennel API.

- SessionContext: current login (token, email, role) with change
  notifications and durable storage
- KennelApiClient: httpx client that sends the session's bearer token

Usage:
    session = SessionContext(storage=JsonFileSessionStorage(path))
    session.restore()
    async with KennelApiClient(base_url, session=session) as client:
        await client.login("owner@kennel.com", "Secret1")
        dogs = await client.dogs.list()
"""

from src.client.api_client import ApiError, KennelApiClient, ResourceEndpoint
from src.client.session import SessionContext, SessionState
from src.client.storage import (
    InMemorySessionStorage,
    JsonFileSessionStorage,
    SessionStorage,
)

__all__ = [
    "ApiError",
    "InMemorySessionStorage",
    "JsonFileSessionStorage",
    "KennelApiClient",
    "ResourceEndpoint",
    "SessionContext",
    "SessionState",
    "SessionStorage",
]
