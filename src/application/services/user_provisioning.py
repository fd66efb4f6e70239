"""User provisioning service.

Shared by self-registration and admin user creation:

1. Resolve the role name
2. Check the password policy (all violations reported together)
3. Hash the password and store the user
4. For Customer-role users, create the linked Customer profile

Email uniqueness is checked by the calling handler because the two entry
points report duplicates with different messages.
"""

from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Customer, User
from src.domain.enums import UserRole
from src.domain.protocols import (
    CustomerRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)
from src.domain.validators import (
    describe_password_violations,
    password_policy_violations,
)


def invalid_role_error(role_name: str | None) -> ValidationError:
    return ValidationError(
        code=ErrorCode.INVALID_ROLE,
        message=(
            f"Role '{role_name}' does not exist. "
            f"Valid roles are: {', '.join(UserRole.values())}."
        ),
        field="role",
    )


class UserProvisioner:
    """Creates users and their customer profiles."""

    def __init__(
        self,
        user_repo: UserRepository,
        customer_repo: CustomerRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._customer_repo = customer_repo
        self._password_service = password_service
        self._logger = logger

    async def provision(
        self,
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role_name: str | None,
    ) -> Result[User, DomainError]:
        """Validate and store a new user.

        Returns:
            Success(User) or Failure(ValidationError) for an unknown role,
            a weak password, or an email owned by another user's profile.
        """
        role = UserRole.parse(role_name)
        if role is None:
            return Failure(error=invalid_role_error(role_name))

        violations = password_policy_violations(password)
        if violations:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PASSWORD_TOO_WEAK,
                    message=describe_password_violations(violations),
                    field="password",
                )
            )

        # A staff-created profile may already exist for this email
        existing_profile: Customer | None = None
        if role is UserRole.CUSTOMER:
            existing_profile = await self._customer_repo.find_by_email(email)
            if existing_profile is not None and existing_profile.user_id is not None:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.EMAIL_ALREADY_REGISTERED,
                        message=f"A customer with email '{email}' already exists.",
                        field="email",
                    )
                )

        user = User(
            id=uuid7(),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=email,
            password_hash=self._password_service.hash_password(password),
            role=role,
        )
        await self._user_repo.save(user)

        if role is UserRole.CUSTOMER:
            if existing_profile is not None:
                existing_profile.user_id = user.id
                profile = await self._customer_repo.update(existing_profile)
            else:
                profile = await self._customer_repo.save(
                    Customer(
                        name=user.display_name,
                        email=user.email,
                        phone="",
                        user_id=user.id,
                    )
                )
            self._logger.info(
                "customer_profile_linked",
                user_id=str(user.id),
                customer_id=profile.id,
            )

        self._logger.info("user_created", user_id=str(user.id), role=role.value)
        return Success(value=user)
