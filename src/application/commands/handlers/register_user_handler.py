"""Registration handler.

Flow:
1. Check email uniqueness across users
2. Provision the user (role, password policy, hash, customer profile)
3. Return a confirmation message (no token; the client logs in next)

Architecture:
- Application layer ONLY imports from domain/core and application services
- Repositories and services are injected via protocols
"""

from src.application.commands.auth_commands import RegisterUser
from src.application.services.user_provisioning import UserProvisioner
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UserRepository


class RegisterUserHandler:
    """Handler for self-service registration."""

    def __init__(
        self,
        user_repo: UserRepository,
        provisioner: UserProvisioner,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._provisioner = provisioner
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[str, DomainError]:
        """Handle registration.

        Returns:
            Success(confirmation message) or Failure(ValidationError).
        """
        self._logger.info("user_registration_attempted", email=cmd.email)

        # Step 1: Email must not belong to an existing user
        if await self._user_repo.find_by_email(cmd.email) is not None:
            self._logger.warning(
                "user_registration_failed", email=cmd.email, reason="duplicate_email"
            )
            return Failure(
                error=ValidationError(
                    code=ErrorCode.EMAIL_ALREADY_REGISTERED,
                    message=(
                        f"An account with email '{cmd.email}' already exists. "
                        "Please login instead."
                    ),
                    field="email",
                )
            )

        # Step 2: Create user (and customer profile for Customer role)
        result = await self._provisioner.provision(
            email=cmd.email,
            password=cmd.password,
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            role_name=cmd.role,
        )
        if isinstance(result, Failure):
            self._logger.warning(
                "user_registration_failed",
                email=cmd.email,
                reason=result.error.code.value,
            )
            return result

        # Step 3: Confirmation
        self._logger.info(
            "user_registration_succeeded", user_id=str(result.value.id)
        )
        return Success(
            value=f"Account created successfully! You can now login with {cmd.email}."
        )
