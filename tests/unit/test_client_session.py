"""Unit tests for the client session and its storage backends."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from src.client import (
    InMemorySessionStorage,
    JsonFileSessionStorage,
    SessionContext,
    SessionState,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def make_token(expires_at: datetime, role: str = "Customer") -> str:
    return jwt.encode(
        {
            "sub": "0190f0e0-0000-7000-8000-000000000001",
            "email": "jane@kennel.com",
            "roles": [role],
            "exp": int(expires_at.timestamp()),
        },
        "client-side-tests-do-not-verify-this-key",
        algorithm="HS256",
    )


@pytest.fixture
def storage() -> InMemorySessionStorage:
    return InMemorySessionStorage()


@pytest.fixture
def session(storage) -> SessionContext:
    return SessionContext(storage=storage, clock=lambda: NOW)


@pytest.mark.unit
class TestSessionContext:
    def test_starts_anonymous(self, session):
        assert session.is_authenticated is False
        assert session.token is None
        assert session.is_in_role("Admin") is False

    def test_login_persists_and_notifies(self, session, storage):
        # Arrange
        seen: list[SessionState] = []
        session.subscribe(seen.append)
        token = make_token(NOW + timedelta(hours=1))

        # Act
        state = session.login(token, "jane@kennel.com", "Customer")

        # Assert
        assert state.is_authenticated is True
        assert state.expires_at == NOW + timedelta(hours=1)
        assert storage.load() == {
            "token": token,
            "email": "jane@kennel.com",
            "role": "Customer",
        }
        assert seen == [state]

    def test_logout_clears_storage_and_notifies(self, session, storage):
        seen: list[SessionState] = []
        session.login(make_token(NOW + timedelta(hours=1)), "jane@kennel.com", "Customer")
        session.subscribe(seen.append)

        session.logout()

        assert session.is_authenticated is False
        assert storage.load() is None
        assert seen[-1].is_authenticated is False

    def test_unsubscribe_stops_notifications(self, session):
        seen: list[SessionState] = []
        unsubscribe = session.subscribe(seen.append)

        unsubscribe()
        unsubscribe()
        session.logout()

        assert seen == []

    def test_is_in_role_is_case_insensitive(self, session):
        session.login(make_token(NOW + timedelta(hours=1)), "s@kennel.com", "Staff")

        assert session.is_in_role("admin", "staff") is True
        assert session.is_in_role("Customer") is False

    def test_is_expired(self, storage):
        clock_now = [NOW]
        session = SessionContext(storage=storage, clock=lambda: clock_now[0])
        session.login(make_token(NOW + timedelta(minutes=5)), "jane@kennel.com", "Customer")

        assert session.is_expired() is False
        clock_now[0] = NOW + timedelta(minutes=6)
        assert session.is_expired() is True


@pytest.mark.unit
class TestSessionRestore:
    def test_restores_valid_token(self):
        token = make_token(NOW + timedelta(hours=1), role="Admin")
        storage = InMemorySessionStorage(
            {"token": token, "email": "jane@kennel.com", "role": "Admin"}
        )
        session = SessionContext(storage=storage, clock=lambda: NOW)

        state = session.restore()

        assert state.token == token
        assert state.role == "Admin"
        assert session.is_authenticated is True

    def test_role_falls_back_to_token_claims(self):
        token = make_token(NOW + timedelta(hours=1), role="Staff")
        session = SessionContext(
            storage=InMemorySessionStorage({"token": token}), clock=lambda: NOW
        )

        state = session.restore()

        assert state.role == "Staff"
        assert state.email == "jane@kennel.com"

    def test_expired_token_is_discarded(self):
        # Arrange
        storage = InMemorySessionStorage(
            {
                "token": make_token(NOW - timedelta(minutes=1)),
                "email": "jane@kennel.com",
                "role": "Customer",
            }
        )
        session = SessionContext(storage=storage, clock=lambda: NOW)
        seen: list[SessionState] = []
        session.subscribe(seen.append)

        # Act
        state = session.restore()

        # Assert
        assert state.is_authenticated is False
        assert storage.load() is None
        assert seen and seen[-1].is_authenticated is False

    def test_malformed_token_is_discarded(self):
        storage = InMemorySessionStorage({"token": "garbage"})
        session = SessionContext(storage=storage, clock=lambda: NOW)

        assert session.restore().is_authenticated is False
        assert storage.load() is None

    def test_empty_storage(self, session):
        assert session.restore().is_authenticated is False


@pytest.mark.unit
class TestJsonFileSessionStorage:
    def test_save_load_clear(self, tmp_path):
        storage = JsonFileSessionStorage(tmp_path / "nested" / "session.json")

        storage.save({"token": "t", "email": "e", "role": "Admin"})

        assert storage.load() == {"token": "t", "email": "e", "role": "Admin"}
        storage.clear()
        assert storage.load() is None
        storage.clear()

    def test_corrupt_file_loads_as_none(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json", encoding="utf-8")

        assert JsonFileSessionStorage(path).load() is None

    def test_non_object_json_loads_as_none(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("[1, 2]", encoding="utf-8")

        assert JsonFileSessionStorage(path).load() is None

    def test_session_survives_restart(self, tmp_path):
        path = tmp_path / "session.json"
        token = make_token(NOW + timedelta(hours=1))
        SessionContext(storage=JsonFileSessionStorage(path), clock=lambda: NOW).login(
            token, "jane@kennel.com", "Customer"
        )

        restored = SessionContext(
            storage=JsonFileSessionStorage(path), clock=lambda: NOW
        ).restore()

        assert restored.token == token
