"""Unit tests for registration, login and user provisioning.

Tests cover:
- Duplicate email rejection
- Role resolution and the password policy
- Customer profile creation and linking for Customer-role users
- Login with unknown email, wrong password and valid credentials
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.handlers.login_user_handler import (
    LoginResult,
    LoginUserHandler,
)
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.services.user_provisioning import UserProvisioner
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ValidationError
from src.core.result import Failure, Success
from src.domain.entities import Customer, User
from src.domain.enums import UserRole


def _user(role: UserRole = UserRole.CUSTOMER) -> User:
    return User(
        id=uuid7(),
        first_name="Jane",
        last_name="Doe",
        email="jane@kennel.com",
        password_hash="hashed",
        role=role,
    )


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    return repo


@pytest.fixture
def profiles() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    repo.save.side_effect = lambda customer: Customer(
        id=1,
        name=customer.name,
        email=customer.email,
        phone=customer.phone,
        user_id=customer.user_id,
    )
    repo.update.side_effect = lambda customer: customer
    return repo


@pytest.fixture
def password_service() -> Mock:
    service = Mock()
    service.hash_password.return_value = "hashed_password"
    return service


@pytest.fixture
def provisioner(user_repo, profiles, password_service, mock_logger) -> UserProvisioner:
    return UserProvisioner(
        user_repo=user_repo,
        customer_repo=profiles,
        password_service=password_service,
        logger=mock_logger,
    )


def _register(**overrides) -> RegisterUser:
    fields = {
        "email": "jane@kennel.com",
        "password": "Secret1",
        "first_name": "Jane",
        "last_name": "Doe",
    }
    fields.update(overrides)
    return RegisterUser(**fields)


# =============================================================================
# Provisioning
# =============================================================================


@pytest.mark.unit
class TestUserProvisioner:
    async def test_customer_role_creates_linked_profile(
        self, provisioner, user_repo, profiles, password_service
    ):
        # Act
        result = await provisioner.provision(
            email="jane@kennel.com",
            password="Secret1",
            first_name=" Jane ",
            last_name="Doe",
            role_name="customer",
        )

        # Assert
        assert isinstance(result, Success)
        user = result.value
        assert user.role is UserRole.CUSTOMER
        assert user.first_name == "Jane"
        assert user.password_hash == "hashed_password"
        password_service.hash_password.assert_called_once_with("Secret1")
        user_repo.save.assert_awaited_once_with(user)
        profiles.save.assert_awaited_once()
        saved_profile = profiles.save.await_args.args[0]
        assert saved_profile.user_id == user.id
        assert saved_profile.name == "Jane Doe"
        assert saved_profile.email == "jane@kennel.com"
        assert saved_profile.phone == ""

    async def test_staff_role_has_no_profile(self, provisioner, profiles):
        result = await provisioner.provision(
            email="sam@kennel.com",
            password="Secret1",
            first_name="Sam",
            last_name="Staff",
            role_name="Staff",
        )

        assert isinstance(result, Success)
        assert result.value.role is UserRole.STAFF
        profiles.find_by_email.assert_not_called()
        profiles.save.assert_not_called()

    async def test_existing_unlinked_profile_is_linked(self, provisioner, profiles):
        # Arrange
        walk_in = Customer(id=7, name="Jane Doe", email="jane@kennel.com")
        profiles.find_by_email.return_value = walk_in

        # Act
        result = await provisioner.provision(
            email="jane@kennel.com",
            password="Secret1",
            first_name="Jane",
            last_name="Doe",
            role_name="Customer",
        )

        # Assert
        assert isinstance(result, Success)
        profiles.save.assert_not_called()
        linked = profiles.update.await_args.args[0]
        assert linked.id == 7
        assert linked.user_id == result.value.id

    async def test_profile_linked_elsewhere_is_rejected(
        self, provisioner, profiles, user_repo
    ):
        profiles.find_by_email.return_value = Customer(
            id=7, name="Jane Doe", email="jane@kennel.com", user_id=uuid7()
        )

        result = await provisioner.provision(
            email="jane@kennel.com",
            password="Secret1",
            first_name="Jane",
            last_name="Doe",
            role_name="Customer",
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.EMAIL_ALREADY_REGISTERED
        user_repo.save.assert_not_called()

    async def test_unknown_role_is_rejected(self, provisioner, user_repo):
        result = await provisioner.provision(
            email="jane@kennel.com",
            password="Secret1",
            first_name="Jane",
            last_name="Doe",
            role_name="Groomer",
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.INVALID_ROLE
        assert result.error.message == (
            "Role 'Groomer' does not exist. Valid roles are: Admin, Staff, Customer."
        )
        user_repo.save.assert_not_called()

    async def test_weak_password_reports_every_violation(self, provisioner):
        result = await provisioner.provision(
            email="jane@kennel.com",
            password="abc",
            first_name="Jane",
            last_name="Doe",
            role_name="Customer",
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "password"
        assert result.error.message == (
            "Password must contain at least 6 characters, an uppercase letter, a digit."
        )


# =============================================================================
# Registration
# =============================================================================


@pytest.mark.unit
class TestRegisterUserHandler:
    async def test_register_returns_confirmation(
        self, user_repo, provisioner, mock_logger
    ):
        handler = RegisterUserHandler(user_repo, provisioner, mock_logger)

        result = await handler.handle(_register())

        assert result == Success(
            value="Account created successfully! You can now login with jane@kennel.com."
        )

    async def test_register_defaults_to_customer(
        self, user_repo, provisioner, mock_logger
    ):
        handler = RegisterUserHandler(user_repo, provisioner, mock_logger)

        await handler.handle(_register())

        saved_user = user_repo.save.await_args.args[0]
        assert saved_user.role is UserRole.CUSTOMER

    async def test_duplicate_email_is_rejected(self, user_repo, provisioner, mock_logger):
        # Arrange
        user_repo.find_by_email.return_value = _user()
        handler = RegisterUserHandler(user_repo, provisioner, mock_logger)

        # Act
        result = await handler.handle(_register())

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.EMAIL_ALREADY_REGISTERED
        assert result.error.message == (
            "An account with email 'jane@kennel.com' already exists. Please login instead."
        )
        user_repo.save.assert_not_called()

    async def test_provisioning_failure_is_returned(
        self, user_repo, provisioner, mock_logger
    ):
        handler = RegisterUserHandler(user_repo, provisioner, mock_logger)

        result = await handler.handle(_register(role="Owner"))

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.INVALID_ROLE
        mock_logger.warning.assert_called_once()


# =============================================================================
# Login
# =============================================================================


@pytest.mark.unit
class TestLoginUserHandler:
    @pytest.fixture
    def token_service(self) -> Mock:
        service = Mock()
        service.generate_access_token.return_value = "signed.jwt.token"
        return service

    async def test_login_issues_token(
        self, user_repo, password_service, token_service, mock_logger
    ):
        # Arrange
        user = _user(UserRole.STAFF)
        user_repo.find_by_email.return_value = user
        password_service.verify_password.return_value = True
        handler = LoginUserHandler(user_repo, password_service, token_service, mock_logger)

        # Act
        result = await handler.handle(
            LoginUser(email="jane@kennel.com", password="Secret1")
        )

        # Assert
        assert result == Success(
            value=LoginResult(token="signed.jwt.token", email=user.email, role="Staff")
        )
        token_service.generate_access_token.assert_called_once_with(
            user_id=user.id,
            email=user.email,
            name="Jane Doe",
            roles=["Staff"],
        )

    async def test_unknown_email(
        self, user_repo, password_service, token_service, mock_logger
    ):
        handler = LoginUserHandler(user_repo, password_service, token_service, mock_logger)

        result = await handler.handle(
            LoginUser(email="ghost@kennel.com", password="Secret1")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert "No account found with email 'ghost@kennel.com'" in result.error.message
        token_service.generate_access_token.assert_not_called()

    async def test_wrong_password(
        self, user_repo, password_service, token_service, mock_logger
    ):
        user_repo.find_by_email.return_value = _user()
        password_service.verify_password.return_value = False
        handler = LoginUserHandler(user_repo, password_service, token_service, mock_logger)

        result = await handler.handle(
            LoginUser(email="jane@kennel.com", password="Wrong1")
        )

        assert isinstance(result, Failure)
        assert result.error.message == "Incorrect password. Please try again."
