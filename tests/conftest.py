"""Shared pytest configuration for the kennel API tests.

Environment variables are set before any ``src`` import so the module
level Settings object picks up test values:

- in-memory SQLite database
- fixed signing key
- lowest allowed bcrypt cost (hashing speed)
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-kennel-api-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from unittest.mock import AsyncMock, Mock  # noqa: E402

import pytest  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.application.services.access_policy import AccessPolicy  # noqa: E402
from src.domain.enums import UserRole  # noqa: E402
from src.domain.value_objects import Caller  # noqa: E402
from src.infrastructure.authorization import CasbinAdapter, create_enforcer  # noqa: E402


# =============================================================================
# Callers
# =============================================================================


def make_caller(role: UserRole | None, email: str = "someone@kennel.com") -> Caller:
    return Caller(user_id=uuid7(), email=email, role=role, name="Test Caller")


@pytest.fixture
def admin() -> Caller:
    return make_caller(UserRole.ADMIN, "admin@kennel.com")


@pytest.fixture
def staff() -> Caller:
    return make_caller(UserRole.STAFF, "staff@kennel.com")


@pytest.fixture
def customer_caller() -> Caller:
    return make_caller(UserRole.CUSTOMER, "customer@kennel.com")


# =============================================================================
# Collaborators
# =============================================================================


@pytest.fixture
def mock_logger() -> Mock:
    return Mock()


@pytest.fixture(scope="session")
def enforcer():
    """Casbin enforcer loaded from the shipped model and policy files."""
    return create_enforcer()


@pytest.fixture
def customer_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_user_id.return_value = None
    return repo


@pytest.fixture
def dog_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.list_ids_by_customer.return_value = []
    return repo


@pytest.fixture
def access_policy(enforcer, customer_repo, dog_repo, mock_logger) -> AccessPolicy:
    """Real access policy over the real role matrix and mocked repositories."""
    return AccessPolicy(
        matrix=CasbinAdapter(enforcer, mock_logger),
        customer_repo=customer_repo,
        dog_repo=dog_repo,
        logger=mock_logger,
    )
