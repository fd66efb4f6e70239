"""Error classes shared by every resource.

Each class corresponds to one HTTP status family (see ErrorResponseBuilder):

- ValidationError: bad input, id mismatch, duplicate email, missing profile (400)
- AuthenticationError: bad credentials or token (401)
- AuthorizationError: role or ownership denied (403)
- NotFoundError: missing record (404)
- ConflictError: dependent records block the operation (400)

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.DOG_NOT_FOUND,
        message="Dog not found.",
        resource_type="Dog",
        resource_id=str(dog_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation, when there is one.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Entity name (Dog, Booking, ...).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Operation blocked by the current state of related records.

    Attributes:
        resource_type: Entity whose state blocks the operation.
        dependent_count: Number of dependent rows, if that is the reason.
    """

    resource_type: str
    dependent_count: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Caller identity could not be established."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Caller is known but may not perform the operation.

    Attributes:
        required_permission: ``resource:action`` pair that was denied.
    """

    required_permission: str | None = None
