"""Token generation protocol for domain layer.

Defines how session tokens are issued at login and validated on every
protected request.

Token Strategy:
    - Signed JWT carrying identity and role claims
    - Fixed lifetime, no refresh tokens
    - Stateless validation (no database lookup)
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.errors import AuthenticationError
from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """Session token issuance and validation interface.

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            name=user.display_name,
            roles=[user.role.value],
        )

        match token_service.validate_access_token(token):
            case Success(value=claims):
                user_id = claims["sub"]
            case Failure(error=error):
                ...  # expired, tampered or malformed
    """

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        name: str,
        roles: list[str],
    ) -> str:
        """Issue a signed token.

        Claims: sub, email, name, roles, iss, aud, iat, exp, jti.
        """
        ...

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, Any], AuthenticationError]:
        """Verify signature, issuer, audience and expiry.

        Returns:
            Success(claims) for a valid token, Failure otherwise.
        """
        ...
