"""Unit tests for customer, dog, kennel and booking command handlers.

Tests cover:
- Check order: id mismatch, role matrix, existence, ownership, validation
- Reference checks (customer, dog, kennel, linked user)
- Dependent-record conflicts on customer deletion
- Booking date validation

Architecture:
- Real AccessPolicy over the Casbin policy files
- AsyncMock repositories
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.booking_commands import (
    CreateBooking,
    DeleteBooking,
    UpdateBooking,
)
from src.application.commands.customer_commands import (
    CreateCustomer,
    DeleteCustomer,
    UpdateCustomer,
)
from src.application.commands.dog_commands import CreateDog, DeleteDog, UpdateDog
from src.application.commands.handlers.booking_handlers import (
    CreateBookingHandler,
    DeleteBookingHandler,
    UpdateBookingHandler,
)
from src.application.commands.handlers.customer_handlers import (
    CreateCustomerHandler,
    DeleteCustomerHandler,
    UpdateCustomerHandler,
)
from src.application.commands.handlers.dog_handlers import (
    CreateDogHandler,
    DeleteDogHandler,
    UpdateDogHandler,
)
from src.application.commands.handlers.kennel_handlers import (
    CreateKennelHandler,
    UpdateKennelHandler,
)
from src.application.commands.kennel_commands import CreateKennel, UpdateKennel
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Success
from src.domain.entities import Booking, Customer, Dog, Kennel, User
from src.domain.enums import UserRole

CHECK_IN = datetime(2026, 6, 1, 12, tzinfo=UTC)
CHECK_OUT = datetime(2026, 6, 5, 12, tzinfo=UTC)


def _echo_with_id(new_id: int):
    """Repository save() stand-in assigning an id."""

    def save(entity):
        entity.id = new_id
        return entity

    return save


def _link_profile(customer_repo, dog_repo, caller, dog_ids=(1,)):
    customer_repo.find_by_user_id.return_value = Customer(
        id=10, name="Jane Doe", email=caller.email, user_id=caller.user_id
    )
    dog_repo.list_ids_by_customer.return_value = list(dog_ids)


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    return repo


@pytest.fixture
def kennel_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def booking_repo() -> AsyncMock:
    return AsyncMock()


# =============================================================================
# Dogs
# =============================================================================


@pytest.mark.unit
class TestCreateDogHandler:
    async def test_staff_creates_dog_for_existing_customer(
        self, dog_repo, customer_repo, access_policy, mock_logger, staff
    ):
        # Arrange
        customer_repo.find_by_id.return_value = Customer(
            id=5, name="Bob", email="bob@kennel.com"
        )
        dog_repo.save.side_effect = _echo_with_id(1)
        handler = CreateDogHandler(dog_repo, customer_repo, access_policy, mock_logger)

        # Act
        result = await handler.handle(
            CreateDog(caller=staff, name="Rex", breed="Lab", age=3, customer_id=5)
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.id == 1
        assert result.value.customer_id == 5

    async def test_unknown_customer_is_invalid_reference(
        self, dog_repo, customer_repo, access_policy, mock_logger, staff
    ):
        customer_repo.find_by_id.return_value = None
        handler = CreateDogHandler(dog_repo, customer_repo, access_policy, mock_logger)

        result = await handler.handle(
            CreateDog(caller=staff, name="Rex", breed="Lab", age=3, customer_id=42)
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.INVALID_REFERENCE
        assert result.error.message == "Customer with id 42 does not exist."
        dog_repo.save.assert_not_called()

    async def test_customer_dog_is_assigned_to_own_profile(
        self, dog_repo, customer_repo, access_policy, mock_logger, customer_caller
    ):
        # Arrange
        _link_profile(customer_repo, dog_repo, customer_caller)
        customer_repo.find_by_id.return_value = Customer(
            id=10, name="Jane Doe", email=customer_caller.email
        )
        dog_repo.save.side_effect = _echo_with_id(3)
        handler = CreateDogHandler(dog_repo, customer_repo, access_policy, mock_logger)

        # Act
        result = await handler.handle(
            CreateDog(caller=customer_caller, name="Rex", breed="Lab", age=3)
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.customer_id == 10

    async def test_anonymous_caller_is_rejected(
        self, dog_repo, customer_repo, access_policy, mock_logger
    ):
        handler = CreateDogHandler(dog_repo, customer_repo, access_policy, mock_logger)

        result = await handler.handle(CreateDog(caller=None, name="Rex", breed="Lab", age=3))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)


@pytest.mark.unit
class TestUpdateDogHandler:
    async def test_id_mismatch_is_checked_first(
        self, dog_repo, customer_repo, access_policy, mock_logger
    ):
        handler = UpdateDogHandler(dog_repo, customer_repo, access_policy, mock_logger)

        # Anonymous caller: the mismatch still wins
        result = await handler.handle(
            UpdateDog(caller=None, dog_id=1, payload_id=2, name="Rex", breed="Lab", age=3)
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.ID_MISMATCH
        assert result.error.message == "Dog ID mismatch."

    async def test_missing_dog_is_not_found(
        self, dog_repo, customer_repo, access_policy, mock_logger, staff
    ):
        dog_repo.find_by_id.return_value = None
        handler = UpdateDogHandler(dog_repo, customer_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateDog(caller=staff, dog_id=9, payload_id=9, name="Rex", breed="Lab", age=3)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.message == "Dog not found."

    async def test_customer_cannot_update_foreign_dog(
        self, dog_repo, customer_repo, access_policy, mock_logger, customer_caller
    ):
        # Arrange
        _link_profile(customer_repo, dog_repo, customer_caller, dog_ids=(1,))
        dog_repo.find_by_id.return_value = Dog(
            id=2, name="Max", breed="Pug", age=5, customer_id=11
        )
        handler = UpdateDogHandler(dog_repo, customer_repo, access_policy, mock_logger)

        # Act
        result = await handler.handle(
            UpdateDog(
                caller=customer_caller,
                dog_id=2,
                payload_id=2,
                name="Max",
                breed="Pug",
                age=6,
            )
        )

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        dog_repo.update.assert_not_called()

    async def test_staff_updates_dog(
        self, dog_repo, customer_repo, access_policy, mock_logger, staff
    ):
        dog_repo.find_by_id.return_value = Dog(
            id=2, name="Max", breed="Pug", age=5, customer_id=11
        )
        dog_repo.update.side_effect = lambda dog: dog
        handler = UpdateDogHandler(dog_repo, customer_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateDog(
                caller=staff,
                dog_id=2,
                payload_id=2,
                name="Max",
                breed="Pug",
                age=6,
                customer_id=11,
            )
        )

        assert isinstance(result, Success)
        assert result.value.age == 6
        # Owner unchanged, so no reference lookup
        customer_repo.find_by_id.assert_not_called()


@pytest.mark.unit
class TestDeleteDogHandler:
    async def test_customer_may_not_delete(
        self, dog_repo, access_policy, mock_logger, customer_caller
    ):
        handler = DeleteDogHandler(dog_repo, access_policy, mock_logger)

        result = await handler.handle(DeleteDog(caller=customer_caller, dog_id=1))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        dog_repo.delete.assert_not_called()

    async def test_staff_deletes_dog(self, dog_repo, access_policy, mock_logger, staff):
        dog_repo.find_by_id.return_value = Dog(id=1, name="Rex", breed="Lab", age=3)
        handler = DeleteDogHandler(dog_repo, access_policy, mock_logger)

        result = await handler.handle(DeleteDog(caller=staff, dog_id=1))

        assert result == Success(value=None)
        dog_repo.delete.assert_awaited_once_with(1)


# =============================================================================
# Kennels
# =============================================================================


@pytest.mark.unit
class TestKennelHandlers:
    async def test_staff_creates_kennel(self, kennel_repo, access_policy, mock_logger, staff):
        kennel_repo.save.side_effect = _echo_with_id(4)
        handler = CreateKennelHandler(kennel_repo, access_policy, mock_logger)

        result = await handler.handle(
            CreateKennel(
                caller=staff,
                name="K-4",
                size="Large",
                is_available=True,
                price_per_day=Decimal("45.00"),
            )
        )

        assert isinstance(result, Success)
        assert result.value == Kennel(
            id=4,
            name="K-4",
            size="Large",
            is_available=True,
            price_per_day=Decimal("45.00"),
        )

    async def test_customer_cannot_create_kennel(
        self, kennel_repo, access_policy, mock_logger, customer_caller
    ):
        handler = CreateKennelHandler(kennel_repo, access_policy, mock_logger)

        result = await handler.handle(
            CreateKennel(
                caller=customer_caller,
                name="K-4",
                size="Large",
                is_available=True,
                price_per_day=Decimal("45.00"),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)

    async def test_update_missing_kennel(self, kennel_repo, access_policy, mock_logger, staff):
        kennel_repo.find_by_id.return_value = None
        handler = UpdateKennelHandler(kennel_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateKennel(
                caller=staff,
                kennel_id=3,
                payload_id=3,
                name="K-3",
                size="Small",
                is_available=False,
                price_per_day=Decimal("20"),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.KENNEL_NOT_FOUND


# =============================================================================
# Customers
# =============================================================================


@pytest.mark.unit
class TestCustomerHandlers:
    async def test_duplicate_email(
        self, customer_repo, user_repo, access_policy, mock_logger, staff
    ):
        customer_repo.find_by_email.return_value = Customer(
            id=1, name="Bob", email="bob@kennel.com"
        )
        handler = CreateCustomerHandler(customer_repo, user_repo, access_policy, mock_logger)

        result = await handler.handle(
            CreateCustomer(caller=staff, name="Bob", email="bob@kennel.com")
        )

        assert isinstance(result, Failure)
        assert result.error.message == "A customer with email 'bob@kennel.com' already exists."

    async def test_link_to_missing_user(
        self, customer_repo, user_repo, access_policy, mock_logger, staff
    ):
        customer_repo.find_by_email.return_value = None
        handler = CreateCustomerHandler(customer_repo, user_repo, access_policy, mock_logger)

        result = await handler.handle(
            CreateCustomer(
                caller=staff, name="Bob", email="bob@kennel.com", user_id=uuid7()
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.INVALID_REFERENCE
        customer_repo.save.assert_not_called()

    async def test_link_to_user_owned_by_another_customer(
        self, customer_repo, user_repo, access_policy, mock_logger, staff
    ):
        # Arrange
        linked_user_id = uuid7()
        customer_repo.find_by_email.return_value = None
        user_repo.find_by_id.return_value = User(
            id=linked_user_id,
            first_name="Bob",
            last_name="B",
            email="bob@kennel.com",
            password_hash="x",
            role=UserRole.CUSTOMER,
        )
        customer_repo.find_by_user_id.return_value = Customer(
            id=2, name="Other", email="other@kennel.com", user_id=linked_user_id
        )
        handler = CreateCustomerHandler(customer_repo, user_repo, access_policy, mock_logger)

        # Act
        result = await handler.handle(
            CreateCustomer(
                caller=staff, name="Bob", email="bob@kennel.com", user_id=linked_user_id
            )
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.message == "That user account is already linked to another customer."

    async def test_update_keeps_existing_user_link(
        self, customer_repo, user_repo, access_policy, mock_logger, staff
    ):
        link = uuid7()
        customer_repo.find_by_id.return_value = Customer(
            id=3, name="Bob", email="bob@kennel.com", user_id=link
        )
        customer_repo.find_by_email.return_value = None
        customer_repo.update.side_effect = lambda customer: customer
        handler = UpdateCustomerHandler(customer_repo, user_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateCustomer(
                caller=staff,
                customer_id=3,
                payload_id=3,
                name="Robert",
                email="robert@kennel.com",
                phone="555-0101",
            )
        )

        assert isinstance(result, Success)
        assert result.value.user_id == link
        assert result.value.name == "Robert"

    async def test_delete_blocked_by_dogs(
        self, customer_repo, dog_repo, access_policy, mock_logger, admin
    ):
        customer_repo.find_by_id.return_value = Customer(
            id=3, name="Bob", email="bob@kennel.com"
        )
        dog_repo.count_by_customer.return_value = 2
        handler = DeleteCustomerHandler(customer_repo, dog_repo, access_policy, mock_logger)

        result = await handler.handle(DeleteCustomer(caller=admin, customer_id=3))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.dependent_count == 2
        assert result.error.message.startswith(
            "Cannot delete customer 'Bob' because they have 2 dog(s) registered."
        )
        customer_repo.delete.assert_not_called()

    async def test_delete_without_dogs(
        self, customer_repo, dog_repo, access_policy, mock_logger, admin
    ):
        customer_repo.find_by_id.return_value = Customer(
            id=3, name="Bob", email="bob@kennel.com"
        )
        dog_repo.count_by_customer.return_value = 0
        handler = DeleteCustomerHandler(customer_repo, dog_repo, access_policy, mock_logger)

        result = await handler.handle(DeleteCustomer(caller=admin, customer_id=3))

        assert result == Success(value=None)
        dog_repo.count_by_customer.assert_awaited_once_with(3)
        customer_repo.delete.assert_awaited_once_with(3)

    async def test_staff_may_not_delete(
        self, customer_repo, dog_repo, access_policy, mock_logger, staff
    ):
        handler = DeleteCustomerHandler(customer_repo, dog_repo, access_policy, mock_logger)

        result = await handler.handle(DeleteCustomer(caller=staff, customer_id=3))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)


# =============================================================================
# Bookings
# =============================================================================


@pytest.mark.unit
class TestBookingHandlers:
    @pytest.fixture
    def create_handler(self, booking_repo, dog_repo, kennel_repo, access_policy, mock_logger):
        return CreateBookingHandler(
            booking_repo, dog_repo, kennel_repo, access_policy, mock_logger
        )

    async def test_create_booking(
        self, create_handler, booking_repo, dog_repo, kennel_repo, staff
    ):
        # Arrange
        dog_repo.find_by_id.return_value = Dog(id=1, name="Rex", breed="Lab", age=3)
        kennel_repo.find_by_id.return_value = Kennel(id=2, name="K-2", size="Small")
        booking_repo.save.side_effect = _echo_with_id(8)

        # Act
        result = await create_handler.handle(
            CreateBooking(
                caller=staff,
                dog_id=1,
                kennel_id=2,
                check_in_date=CHECK_IN,
                check_out_date=CHECK_OUT,
                total_cost=Decimal("120.00"),
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.id == 8
        assert result.value.status == "Pending"

    async def test_checkout_before_checkin(self, create_handler, booking_repo, staff):
        result = await create_handler.handle(
            CreateBooking(
                caller=staff,
                dog_id=1,
                kennel_id=2,
                check_in_date=CHECK_OUT,
                check_out_date=CHECK_IN,
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.message == "Check-out date cannot be before check-in date."
        booking_repo.save.assert_not_called()

    async def test_unknown_kennel(self, create_handler, dog_repo, kennel_repo, staff):
        dog_repo.find_by_id.return_value = Dog(id=1, name="Rex", breed="Lab", age=3)
        kennel_repo.find_by_id.return_value = None

        result = await create_handler.handle(
            CreateBooking(
                caller=staff,
                dog_id=1,
                kennel_id=99,
                check_in_date=CHECK_IN,
                check_out_date=CHECK_OUT,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.message == "Kennel with id 99 does not exist."

    async def test_customer_cannot_book_foreign_dog(
        self, create_handler, customer_repo, dog_repo, customer_caller
    ):
        _link_profile(customer_repo, dog_repo, customer_caller, dog_ids=(1,))

        result = await create_handler.handle(
            CreateBooking(
                caller=customer_caller,
                dog_id=2,
                kennel_id=1,
                check_in_date=CHECK_IN,
                check_out_date=CHECK_OUT,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.CROSS_CUSTOMER_REFERENCE

    async def test_update_id_mismatch(
        self, booking_repo, dog_repo, kennel_repo, access_policy, mock_logger, staff
    ):
        handler = UpdateBookingHandler(
            booking_repo, dog_repo, kennel_repo, access_policy, mock_logger
        )

        result = await handler.handle(
            UpdateBooking(
                caller=staff,
                booking_id=1,
                payload_id=2,
                dog_id=1,
                kennel_id=1,
                check_in_date=CHECK_IN,
                check_out_date=CHECK_OUT,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.message == "Booking ID mismatch."

    async def test_admin_deletes_booking(self, booking_repo, access_policy, mock_logger, admin):
        booking_repo.find_by_id.return_value = Booking(
            id=5,
            dog_id=1,
            kennel_id=1,
            check_in_date=CHECK_IN,
            check_out_date=CHECK_OUT,
        )
        handler = DeleteBookingHandler(booking_repo, access_policy, mock_logger)

        result = await handler.handle(DeleteBooking(caller=admin, booking_id=5))

        assert result == Success(value=None)
        booking_repo.delete.assert_awaited_once_with(5)
