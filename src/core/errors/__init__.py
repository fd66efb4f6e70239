"""Core error classes.

Handlers return these inside Failure; the presentation layer maps each
class to an HTTP status.

Usage:
    from src.core.errors import DomainError, NotFoundError, ValidationError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
