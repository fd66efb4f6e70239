"""Login handler.

Flow:
1. Find user by email
2. Verify password
3. Issue session token carrying id, email, name and role claims
4. Return Success(LoginResult)
"""

from dataclasses import dataclass

from src.application.commands.auth_commands import LoginUser
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Response data for successful login."""

    token: str
    email: str
    role: str


class LoginUserHandler:
    """Handler for user login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[LoginResult, DomainError]:
        """Handle user login command.

        Returns:
            Success(LoginResult) or Failure(AuthenticationError).
        """
        # Step 1: Find user by email
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None:
            self._logger.warning("user_login_failed", email=cmd.email, reason="unknown_email")
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=(
                        f"No account found with email '{cmd.email}'. Please check "
                        "your email or register for a new account."
                    ),
                )
            )

        # Step 2: Verify password
        if not self._password_service.verify_password(cmd.password, user.password_hash):
            self._logger.warning(
                "user_login_failed", user_id=str(user.id), reason="wrong_password"
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message="Incorrect password. Please try again.",
                )
            )

        # Step 3: Issue token
        token = self._token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            name=user.display_name,
            roles=[user.role.value],
        )

        self._logger.info("user_login_succeeded", user_id=str(user.id), role=user.role.value)
        return Success(value=LoginResult(token=token, email=user.email, role=user.role.value))
