"""Error response builder.

Maps core error classes to HTTP status codes in one place and renders
the ``{"error": message}`` body every client expects.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from src.core.constants import ERROR_BODY_KEY
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
)


def error_body(message: str) -> dict[str, str]:
    return {ERROR_BODY_KEY: message}


class ErrorResponseBuilder:
    """Build error responses from domain errors.

    Example:
        >>> ErrorResponseBuilder.from_domain_error(not_found("Dog", 7))
        # 404 {"error": "Dog not found."}
    """

    @staticmethod
    def status_code_for(error: DomainError) -> int:
        """HTTP status for an error class (500 for anything unmapped)."""
        for error_type, status_code in _STATUS_BY_ERROR:
            if isinstance(error, error_type):
                return status_code
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    @staticmethod
    def from_domain_error(error: DomainError) -> JSONResponse:
        status_code = ErrorResponseBuilder.status_code_for(error)
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(
            status_code=status_code,
            content=error_body(error.message),
            headers=headers,
        )
