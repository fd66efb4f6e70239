"""Authentication commands (CQRS write operations).

Commands are immutable, keyword-only data containers. Handlers execute
the business logic and return Result types.
"""

from dataclasses import dataclass

from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Self-service account registration.

    Attributes:
        email: Login email.
        password: Plaintext password (checked against the policy, then hashed).
        first_name: Given name.
        last_name: Family name.
        role: Requested role name; Customer when omitted.

    Example:
        >>> command = RegisterUser(
        ...     email="owner@kennel.com",
        ...     password="Secret1",
        ...     first_name="Jane",
        ...     last_name="Doe",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    password: str
    first_name: str
    last_name: str
    role: str = UserRole.CUSTOMER.value


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange credentials for a session token."""

    email: str
    password: str
