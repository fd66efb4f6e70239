"""JWT token service (adapter).

Implements TokenGenerationProtocol with PyJWT and HMAC-SHA256.

Claims:
    sub    user id
    email  login email
    name   display name
    roles  role names (one entry today)
    iss    issuer, checked on validation
    aud    audience, checked on validation
    iat    issued-at
    exp    expiry (configurable lifetime, 60 minutes by default)
    jti    unique token id
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success

_REQUIRED_CLAIMS = ["sub", "exp", "iat", "iss", "aud"]


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            name=user.display_name,
            roles=[user.role.value],
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        expiration_minutes: int = 60,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC signing key, at least 32 characters.
            issuer: Value written to and required in the 'iss' claim.
            audience: Value written to and required in the 'aud' claim.
            expiration_minutes: Token lifetime.

        Raises:
            ValueError: If secret_key is too short.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        name: str,
        roles: list[str],
    ) -> str:
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "roles": roles,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, Any], AuthenticationError]:
        """Validate a token and return its claims.

        Signature, expiry, issuer and audience are all checked. Failures
        are returned, never raised.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                audience=self._audience,
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Session has expired. Please login again.",
                )
            )
        except InvalidTokenError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid authentication token.",
                )
            )
        return Success(value=payload)
