"""Error builders shared by resource handlers."""

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError

_NOT_FOUND_CODES: dict[str, ErrorCode] = {
    "Customer": ErrorCode.CUSTOMER_NOT_FOUND,
    "Dog": ErrorCode.DOG_NOT_FOUND,
    "Kennel": ErrorCode.KENNEL_NOT_FOUND,
    "Booking": ErrorCode.BOOKING_NOT_FOUND,
    "User": ErrorCode.USER_NOT_FOUND,
}


def not_found(resource_type: str, resource_id: object) -> NotFoundError:
    """Missing record, e.g. ``not_found("Dog", 7)`` → "Dog not found."."""
    return NotFoundError(
        code=_NOT_FOUND_CODES[resource_type],
        message=f"{resource_type} not found.",
        resource_type=resource_type,
        resource_id=str(resource_id),
    )


def id_mismatch(resource_type: str) -> ValidationError:
    """Path id and body id of an update disagree."""
    return ValidationError(
        code=ErrorCode.ID_MISMATCH,
        message=f"{resource_type} ID mismatch.",
        field="id",
    )


def invalid_reference(resource_type: str, resource_id: object) -> ValidationError:
    """A foreign key in the payload points at nothing."""
    return ValidationError(
        code=ErrorCode.INVALID_REFERENCE,
        message=f"{resource_type} with id {resource_id} does not exist.",
        field=f"{resource_type.lower()}_id",
    )
