"""Kennel data handler factories (customers, dogs, kennels, bookings).

Request-scoped: every handler in a request shares the same session
through the repository factories.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.authorization import get_access_policy
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_booking_repository,
    get_customer_repository,
    get_dog_repository,
    get_kennel_repository,
    get_user_repository,
)

if TYPE_CHECKING:
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
        DeleteKennelHandler,
        UpdateKennelHandler,
    )
    from src.application.queries.handlers.resource_queries import (
        GetBookingHandler,
        GetCustomerHandler,
        GetDogHandler,
        GetKennelHandler,
        ListBookingsHandler,
        ListCustomersHandler,
        ListDogsHandler,
        ListKennelsHandler,
    )
    from src.application.services.access_policy import AccessPolicy
    from src.infrastructure.persistence.repositories import (
        BookingRepository,
        CustomerRepository,
        DogRepository,
        KennelRepository,
        UserRepository,
    )


# ============================================================================
# Customers
# ============================================================================


async def get_list_customers_handler(
    customer_repo: "CustomerRepository" = Depends(get_customer_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "ListCustomersHandler":
    from src.application.queries.handlers.resource_queries import ListCustomersHandler

    return ListCustomersHandler(customer_repo, access_policy)


async def get_get_customer_handler(
    customer_repo: "CustomerRepository" = Depends(get_customer_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "GetCustomerHandler":
    from src.application.queries.handlers.resource_queries import GetCustomerHandler

    return GetCustomerHandler(customer_repo, access_policy)


async def get_create_customer_handler(
    customer_repo: "CustomerRepository" = Depends(get_customer_repository),
    user_repo: "UserRepository" = Depends(get_user_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "CreateCustomerHandler":
    from src.application.commands.handlers.customer_handlers import (
        CreateCustomerHandler,
    )

    return CreateCustomerHandler(
        customer_repo=customer_repo,
        user_repo=user_repo,
        access_policy=access_policy,
        logger=get_logger(),
    )


async def get_update_customer_handler(
    customer_repo: "CustomerRepository" = Depends(get_customer_repository),
    user_repo: "UserRepository" = Depends(get_user_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "UpdateCustomerHandler":
    from src.application.commands.handlers.customer_handlers import (
        UpdateCustomerHandler,
    )

    return UpdateCustomerHandler(
        customer_repo=customer_repo,
        user_repo=user_repo,
        access_policy=access_policy,
        logger=get_logger(),
    )


async def get_delete_customer_handler(
    customer_repo: "CustomerRepository" = Depends(get_customer_repository),
    dog_repo: "DogRepository" = Depends(get_dog_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "DeleteCustomerHandler":
    from src.application.commands.handlers.customer_handlers import (
        DeleteCustomerHandler,
    )

    return DeleteCustomerHandler(
        customer_repo=customer_repo,
        dog_repo=dog_repo,
        access_policy=access_policy,
        logger=get_logger(),
    )


# ============================================================================
# Dogs
# ============================================================================


async def get_list_dogs_handler(
    dog_repo: "DogRepository" = Depends(get_dog_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "ListDogsHandler":
    from src.application.queries.handlers.resource_queries import ListDogsHandler

    return ListDogsHandler(dog_repo, access_policy)


async def get_get_dog_handler(
    dog_repo: "DogRepository" = Depends(get_dog_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "GetDogHandler":
    from src.application.queries.handlers.resource_queries import GetDogHandler

    return GetDogHandler(dog_repo, access_policy)


async def get_create_dog_handler(
    dog_repo: "DogRepository" = Depends(get_dog_repository),
    customer_repo: "CustomerRepository" = Depends(get_customer_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "CreateDogHandler":
    from src.application.commands.handlers.dog_handlers import CreateDogHandler

    return CreateDogHandler(
        dog_repo=dog_repo,
        customer_repo=customer_repo,
        access_policy=access_policy,
        logger=get_logger(),
    )


async def get_update_dog_handler(
    dog_repo: "DogRepository" = Depends(get_dog_repository),
    customer_repo: "CustomerRepository" = Depends(get_customer_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "UpdateDogHandler":
    from src.application.commands.handlers.dog_handlers import UpdateDogHandler

    return UpdateDogHandler(
        dog_repo=dog_repo,
        customer_repo=customer_repo,
        access_policy=access_policy,
        logger=get_logger(),
    )


async def get_delete_dog_handler(
    dog_repo: "DogRepository" = Depends(get_dog_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "DeleteDogHandler":
    from src.application.commands.handlers.dog_handlers import DeleteDogHandler

    return DeleteDogHandler(
        dog_repo=dog_repo, access_policy=access_policy, logger=get_logger()
    )


# ============================================================================
# Kennels
# ============================================================================


async def get_list_kennels_handler(
    kennel_repo: "KennelRepository" = Depends(get_kennel_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "ListKennelsHandler":
    from src.application.queries.handlers.resource_queries import ListKennelsHandler

    return ListKennelsHandler(kennel_repo, access_policy)


async def get_get_kennel_handler(
    kennel_repo: "KennelRepository" = Depends(get_kennel_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "GetKennelHandler":
    from src.application.queries.handlers.resource_queries import GetKennelHandler

    return GetKennelHandler(kennel_repo, access_policy)


async def get_create_kennel_handler(
    kennel_repo: "KennelRepository" = Depends(get_kennel_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "CreateKennelHandler":
    from src.application.commands.handlers.kennel_handlers import CreateKennelHandler

    return CreateKennelHandler(
        kennel_repo=kennel_repo, access_policy=access_policy, logger=get_logger()
    )


async def get_update_kennel_handler(
    kennel_repo: "KennelRepository" = Depends(get_kennel_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "UpdateKennelHandler":
    from src.application.commands.handlers.kennel_handlers import UpdateKennelHandler

    return UpdateKennelHandler(
        kennel_repo=kennel_repo, access_policy=access_policy, logger=get_logger()
    )


async def get_delete_kennel_handler(
    kennel_repo: "KennelRepository" = Depends(get_kennel_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "DeleteKennelHandler":
    from src.application.commands.handlers.kennel_handlers import DeleteKennelHandler

    return DeleteKennelHandler(
        kennel_repo=kennel_repo, access_policy=access_policy, logger=get_logger()
    )


# ============================================================================
# Bookings
# ============================================================================


async def get_list_bookings_handler(
    booking_repo: "BookingRepository" = Depends(get_booking_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "ListBookingsHandler":
    from src.application.queries.handlers.resource_queries import ListBookingsHandler

    return ListBookingsHandler(booking_repo, access_policy)


async def get_get_booking_handler(
    booking_repo: "BookingRepository" = Depends(get_booking_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "GetBookingHandler":
    from src.application.queries.handlers.resource_queries import GetBookingHandler

    return GetBookingHandler(booking_repo, access_policy)


async def get_create_booking_handler(
    booking_repo: "BookingRepository" = Depends(get_booking_repository),
    dog_repo: "DogRepository" = Depends(get_dog_repository),
    kennel_repo: "KennelRepository" = Depends(get_kennel_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "CreateBookingHandler":
    from src.application.commands.handlers.booking_handlers import (
        CreateBookingHandler,
    )

    return CreateBookingHandler(
        booking_repo=booking_repo,
        dog_repo=dog_repo,
        kennel_repo=kennel_repo,
        access_policy=access_policy,
        logger=get_logger(),
    )


async def get_update_booking_handler(
    booking_repo: "BookingRepository" = Depends(get_booking_repository),
    dog_repo: "DogRepository" = Depends(get_dog_repository),
    kennel_repo: "KennelRepository" = Depends(get_kennel_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "UpdateBookingHandler":
    from src.application.commands.handlers.booking_handlers import (
        UpdateBookingHandler,
    )

    return UpdateBookingHandler(
        booking_repo=booking_repo,
        dog_repo=dog_repo,
        kennel_repo=kennel_repo,
        access_policy=access_policy,
        logger=get_logger(),
    )


async def get_delete_booking_handler(
    booking_repo: "BookingRepository" = Depends(get_booking_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "DeleteBookingHandler":
    from src.application.commands.handlers.booking_handlers import (
        DeleteBookingHandler,
    )

    return DeleteBookingHandler(
        booking_repo=booking_repo, access_policy=access_policy, logger=get_logger()
    )
