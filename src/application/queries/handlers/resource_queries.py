"""List and Get query handlers for every resource.

Queries are side-effect free. Scoped (Customer) callers see:
- dogs: the dogs of their own customer profile
- bookings: bookings of those dogs
- customers/users: only their own record, via Get

Dependencies (injected via constructor):
    - Repository for the resource
    - AccessPolicy: role matrix and ownership scope
"""

from src.application.errors import not_found
from src.application.queries.booking_queries import GetBooking, ListBookings
from src.application.queries.customer_queries import GetCustomer, ListCustomers
from src.application.queries.dog_queries import GetDog, ListDogs
from src.application.queries.kennel_queries import GetKennel, ListKennels
from src.application.queries.user_queries import GetUser, ListUsers
from src.application.services.access_policy import AccessPolicy
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Booking, Customer, Dog, Kennel, User
from src.domain.enums import Action, Resource
from src.domain.protocols import (
    BookingRepository,
    CustomerRepository,
    DogRepository,
    KennelRepository,
    UserRepository,
)


class _ResourceQueryHandler:
    def __init__(self, repo, access_policy: AccessPolicy) -> None:
        self._repo = repo
        self._access_policy = access_policy


class ListCustomersHandler(_ResourceQueryHandler):
    _repo: CustomerRepository

    async def handle(self, query: ListCustomers) -> Result[list[Customer], DomainError]:
        grant = await self._access_policy.authorize(
            query.caller, Resource.CUSTOMERS, Action.LIST
        )
        if isinstance(grant, Failure):
            return grant
        return Success(value=await self._repo.list_all())


class GetCustomerHandler(_ResourceQueryHandler):
    _repo: CustomerRepository

    async def handle(self, query: GetCustomer) -> Result[Customer, DomainError]:
        grant = await self._access_policy.authorize(
            query.caller, Resource.CUSTOMERS, Action.READ
        )
        if isinstance(grant, Failure):
            return grant

        customer = await self._repo.find_by_id(query.customer_id)
        if customer is None:
            return Failure(error=not_found("Customer", query.customer_id))
        return self._access_policy.authorize_target(grant.value, customer)


class ListDogsHandler(_ResourceQueryHandler):
    _repo: DogRepository

    async def handle(self, query: ListDogs) -> Result[list[Dog], DomainError]:
        grant = await self._access_policy.authorize(query.caller, Resource.DOGS, Action.LIST)
        if isinstance(grant, Failure):
            return grant

        scope = grant.value.scope
        if scope.unrestricted:
            return Success(value=await self._repo.list_all())
        if scope.customer_id is None:
            return Success(value=[])
        return Success(value=await self._repo.list_by_customer(scope.customer_id))


class GetDogHandler(_ResourceQueryHandler):
    _repo: DogRepository

    async def handle(self, query: GetDog) -> Result[Dog, DomainError]:
        grant = await self._access_policy.authorize(query.caller, Resource.DOGS, Action.READ)
        if isinstance(grant, Failure):
            return grant

        dog = await self._repo.find_by_id(query.dog_id)
        if dog is None:
            return Failure(error=not_found("Dog", query.dog_id))
        return self._access_policy.authorize_target(grant.value, dog)


class ListKennelsHandler(_ResourceQueryHandler):
    _repo: KennelRepository

    async def handle(self, query: ListKennels) -> Result[list[Kennel], DomainError]:
        grant = await self._access_policy.authorize(
            query.caller, Resource.KENNELS, Action.LIST
        )
        if isinstance(grant, Failure):
            return grant
        return Success(value=await self._repo.list_all())


class GetKennelHandler(_ResourceQueryHandler):
    _repo: KennelRepository

    async def handle(self, query: GetKennel) -> Result[Kennel, DomainError]:
        grant = await self._access_policy.authorize(
            query.caller, Resource.KENNELS, Action.READ
        )
        if isinstance(grant, Failure):
            return grant

        kennel = await self._repo.find_by_id(query.kennel_id)
        if kennel is None:
            return Failure(error=not_found("Kennel", query.kennel_id))
        return Success(value=kennel)


class ListBookingsHandler(_ResourceQueryHandler):
    _repo: BookingRepository

    async def handle(self, query: ListBookings) -> Result[list[Booking], DomainError]:
        grant = await self._access_policy.authorize(
            query.caller, Resource.BOOKINGS, Action.LIST
        )
        if isinstance(grant, Failure):
            return grant

        scope = grant.value.scope
        if scope.unrestricted:
            return Success(value=await self._repo.list_all())
        if not scope.dog_ids:
            return Success(value=[])
        return Success(value=await self._repo.list_by_dog_ids(scope.dog_ids))


class GetBookingHandler(_ResourceQueryHandler):
    _repo: BookingRepository

    async def handle(self, query: GetBooking) -> Result[Booking, DomainError]:
        grant = await self._access_policy.authorize(
            query.caller, Resource.BOOKINGS, Action.READ
        )
        if isinstance(grant, Failure):
            return grant

        booking = await self._repo.find_by_id(query.booking_id)
        if booking is None:
            return Failure(error=not_found("Booking", query.booking_id))
        return self._access_policy.authorize_target(grant.value, booking)


class ListUsersHandler(_ResourceQueryHandler):
    _repo: UserRepository

    async def handle(self, query: ListUsers) -> Result[list[User], DomainError]:
        grant = await self._access_policy.authorize(query.caller, Resource.USERS, Action.LIST)
        if isinstance(grant, Failure):
            return grant
        return Success(value=await self._repo.list_all())


class GetUserHandler(_ResourceQueryHandler):
    _repo: UserRepository

    async def handle(self, query: GetUser) -> Result[User, DomainError]:
        grant = await self._access_policy.authorize(query.caller, Resource.USERS, Action.READ)
        if isinstance(grant, Failure):
            return grant

        user = await self._repo.find_by_id(query.user_id)
        if user is None:
            return Failure(error=not_found("User", query.user_id))
        return self._access_policy.authorize_target(grant.value, user)
