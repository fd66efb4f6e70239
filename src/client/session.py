"""Client session state.

SessionContext is an explicit object handed to whatever needs the
current login; there is no module-level session. Every change (login,
logout, restore) is pushed synchronously to subscribers.

Tokens are decoded locally without verifying the signature: the client
only needs the expiry and identity claims, the server re-validates every
request.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import jwt
import structlog

from src.client.storage import SessionStorage

logger = structlog.get_logger("kennel_client.session")


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionState:
    """Snapshot of the current login.

    Attributes:
        token: JWT access token, None when logged out.
        email: Logged-in email.
        role: Role name (Admin, Staff, Customer).
        expires_at: Token expiry, when the token carries one.
    """

    token: str | None = None
    email: str | None = None
    role: str | None = None
    expires_at: datetime | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def to_storage(self) -> dict[str, Any]:
        return {"token": self.token, "email": self.email, "role": self.role}


ANONYMOUS = SessionState()

Subscriber = Callable[[SessionState], None]


def read_claims(token: str) -> dict[str, Any]:
    """Decode token claims without signature verification.

    Raises:
        jwt.InvalidTokenError: If the token is not a well-formed JWT.
    """
    return jwt.decode(
        token,
        options={"verify_signature": False, "verify_exp": False, "verify_aud": False},
        algorithms=["HS256"],
    )


def _expiry(claims: dict[str, Any]) -> datetime | None:
    exp = claims.get("exp")
    if exp is None:
        return None
    return datetime.fromtimestamp(int(exp), tz=UTC)


class SessionContext:
    """Current login plus subscribers and durable storage.

    Args:
        storage: SessionStorage backend; nothing is persisted when None.
        clock: Returns "now" (UTC); replaceable in tests.
    """

    def __init__(
        self,
        storage: SessionStorage | None = None,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._storage = storage
        self._clock = clock
        self._state = ANONYMOUS
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def token(self) -> str | None:
        return self._state.token

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register for state changes.

        Returns:
            Callable that removes the subscription; safe to call twice.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def login(self, token: str, email: str, role: str) -> SessionState:
        """Store a freshly issued token and notify subscribers."""
        try:
            expires_at = _expiry(read_claims(token))
        except jwt.InvalidTokenError:
            expires_at = None

        state = SessionState(token=token, email=email, role=role, expires_at=expires_at)
        if self._storage is not None:
            self._storage.save(state.to_storage())
        self._set(state)
        logger.info("session_login", email=email, role=role)
        return state

    def logout(self) -> None:
        if self._storage is not None:
            self._storage.clear()
        self._set(ANONYMOUS)
        logger.info("session_logout")

    def restore(self) -> SessionState:
        """Rehydrate from storage, dropping expired or unreadable tokens.

        Subscribers are notified with the result either way.
        """
        stored = self._storage.load() if self._storage is not None else None
        token = stored.get("token") if stored else None

        if not token:
            self._set(ANONYMOUS)
            return self._state

        try:
            claims = read_claims(token)
        except jwt.InvalidTokenError:
            logger.warning("session_restore_invalid_token")
            self.logout()
            return self._state

        expires_at = _expiry(claims)
        if expires_at is not None and expires_at <= self._clock():
            logger.info("session_restore_expired")
            self.logout()
            return self._state

        roles = claims.get("roles") or []
        state = SessionState(
            token=token,
            email=stored.get("email") or claims.get("email"),
            role=stored.get("role") or (roles[0] if roles else None),
            expires_at=expires_at,
        )
        self._set(state)
        return state

    def is_expired(self) -> bool:
        expires_at = self._state.expires_at
        return expires_at is not None and expires_at <= self._clock()

    def is_in_role(self, *roles: str) -> bool:
        """True when logged in with one of the given roles (case-insensitive)."""
        role = self._state.role
        if role is None:
            return False
        return role.lower() in {r.lower() for r in roles}

    def _set(self, state: SessionState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            callback(state)
