"""Dog command handlers (create, update, delete).

Every handler asks the access policy first. Customer callers are scoped
to dogs owned by their own customer profile, and the policy rewrites the
ownership field of anything they write.
"""

from src.application.commands.dog_commands import CreateDog, DeleteDog, UpdateDog
from src.application.errors import id_mismatch, invalid_reference, not_found
from src.application.services.access_policy import AccessPolicy
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Dog
from src.domain.enums import Action, Resource
from src.domain.protocols import CustomerRepository, DogRepository, LoggerProtocol


class CreateDogHandler:
    """Register a dog."""

    def __init__(
        self,
        dog_repo: DogRepository,
        customer_repo: CustomerRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._dog_repo = dog_repo
        self._customer_repo = customer_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: CreateDog) -> Result[Dog, DomainError]:
        grant = await self._access_policy.authorize(cmd.caller, Resource.DOGS, Action.CREATE)
        if isinstance(grant, Failure):
            return grant

        checked = self._access_policy.authorize_target(
            grant.value,
            Dog(
                name=cmd.name,
                breed=cmd.breed,
                age=cmd.age,
                customer_id=cmd.customer_id,
            ),
        )
        if isinstance(checked, Failure):
            return checked
        dog = checked.value

        if dog.customer_id is not None:
            if await self._customer_repo.find_by_id(dog.customer_id) is None:
                return Failure(error=invalid_reference("Customer", dog.customer_id))

        saved = await self._dog_repo.save(dog)
        self._logger.info("dog_created", dog_id=saved.id, customer_id=saved.customer_id)
        return Success(value=saved)


class UpdateDogHandler:
    """Replace a dog's details.

    Customer callers must own the stored dog (else AuthorizationError) and
    cannot move it to another customer.
    """

    def __init__(
        self,
        dog_repo: DogRepository,
        customer_repo: CustomerRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._dog_repo = dog_repo
        self._customer_repo = customer_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: UpdateDog) -> Result[Dog, DomainError]:
        if cmd.dog_id != cmd.payload_id:
            return Failure(error=id_mismatch("Dog"))

        grant = await self._access_policy.authorize(cmd.caller, Resource.DOGS, Action.UPDATE)
        if isinstance(grant, Failure):
            return grant

        current = await self._dog_repo.find_by_id(cmd.dog_id)
        if current is None:
            return Failure(error=not_found("Dog", cmd.dog_id))

        checked = self._access_policy.authorize_target(
            grant.value,
            Dog(
                id=cmd.dog_id,
                name=cmd.name,
                breed=cmd.breed,
                age=cmd.age,
                customer_id=cmd.customer_id,
            ),
            current=current,
        )
        if isinstance(checked, Failure):
            return checked
        dog = checked.value

        if dog.customer_id is not None and dog.customer_id != current.customer_id:
            if await self._customer_repo.find_by_id(dog.customer_id) is None:
                return Failure(error=invalid_reference("Customer", dog.customer_id))

        updated = await self._dog_repo.update(dog)
        self._logger.info("dog_updated", dog_id=updated.id)
        return Success(value=updated)


class DeleteDogHandler:
    """Delete a dog and its bookings (Admin and Staff)."""

    def __init__(
        self,
        dog_repo: DogRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._dog_repo = dog_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: DeleteDog) -> Result[None, DomainError]:
        grant = await self._access_policy.authorize(cmd.caller, Resource.DOGS, Action.DELETE)
        if isinstance(grant, Failure):
            return grant

        dog = await self._dog_repo.find_by_id(cmd.dog_id)
        if dog is None:
            return Failure(error=not_found("Dog", cmd.dog_id))

        checked = self._access_policy.authorize_target(grant.value, dog)
        if isinstance(checked, Failure):
            return checked

        await self._dog_repo.delete(cmd.dog_id)
        self._logger.info("dog_deleted", dog_id=cmd.dog_id)
        return Success(value=None)
