"""JWT authentication dependencies.

Turns the ``Authorization: Bearer <token>`` header into a Caller for the
application layer. Role and ownership decisions are not made here; they
belong to the access policy.

Usage:
    async def list_dogs(caller: CallerDep, ...):
        ...
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.value_objects import Caller

# auto_error=False so a missing header gets the same 401 body as a bad token
bearer_scheme = HTTPBearer(auto_error=False)

_AUTH_HEADERS = {"WWW-Authenticate": "Bearer"}


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers=_AUTH_HEADERS,
    )


def caller_from_claims(payload: dict) -> Caller:
    """Build a Caller from validated token claims.

    Raises:
        KeyError, ValueError: If ``sub`` or ``email`` is missing or malformed.
    """
    roles = payload.get("roles") or []
    if isinstance(roles, str):
        roles = [roles]
    return Caller(
        user_id=UUID(str(payload["sub"])),
        email=str(payload["email"]),
        role=UserRole.parse(roles[0]) if roles else None,
        name=str(payload.get("name", "")),
    )


async def get_current_caller(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> Caller:
    """Get the authenticated caller from the bearer token.

    Raises:
        HTTPException 401: If the token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized("Authentication required.")

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                return caller_from_claims(payload)
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid authentication token.") from e
        case Failure(error=error):
            raise _unauthorized(error.message)


CallerDep = Annotated[Caller, Depends(get_current_caller)]
