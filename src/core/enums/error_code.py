"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, *_MISMATCH, *_MISSING)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_HAS_DOGS)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*)
- Authorization errors (PERMISSION_DENIED, RESOURCE_NOT_OWNED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_WEAK = "password_too_weak"
    INVALID_ROLE = "invalid_role"
    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_REFERENCE = "invalid_reference"
    ID_MISMATCH = "id_mismatch"
    EMAIL_ALREADY_REGISTERED = "email_already_registered"
    CUSTOMER_PROFILE_MISSING = "customer_profile_missing"
    CROSS_CUSTOMER_REFERENCE = "cross_customer_reference"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    CUSTOMER_NOT_FOUND = "customer_not_found"
    DOG_NOT_FOUND = "dog_not_found"
    KENNEL_NOT_FOUND = "kennel_not_found"
    BOOKING_NOT_FOUND = "booking_not_found"

    # Conflict errors
    CUSTOMER_HAS_DOGS = "customer_has_dogs"
    SELF_DELETION_FORBIDDEN = "self_deletion_forbidden"

    # Authentication errors
    AUTHENTICATION_REQUIRED = "authentication_required"
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_OWNED = "resource_not_owned"
