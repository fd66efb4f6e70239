"""Customer command handlers.

Customer records are managed by Admin and Staff. Each record can be
linked to at most one login account (user_id); a Customer-role user's
own profile is found through that link.
"""

from uuid import UUID

from src.application.commands.customer_commands import (
    CreateCustomer,
    DeleteCustomer,
    UpdateCustomer,
)
from src.application.errors import id_mismatch, invalid_reference, not_found
from src.application.services.access_policy import AccessPolicy
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Customer
from src.domain.enums import Action, Resource
from src.domain.protocols import (
    CustomerRepository,
    DogRepository,
    LoggerProtocol,
    UserRepository,
)


def _duplicate_email(email: str) -> ValidationError:
    return ValidationError(
        code=ErrorCode.EMAIL_ALREADY_REGISTERED,
        message=f"A customer with email '{email}' already exists.",
        field="email",
    )


async def _check_user_link(
    user_repo: UserRepository,
    customer_repo: CustomerRepository,
    user_id: UUID,
    customer_id: int | None,
) -> ValidationError | None:
    """The linked account must exist and not belong to another customer."""
    if await user_repo.find_by_id(user_id) is None:
        return invalid_reference("User", user_id)

    linked = await customer_repo.find_by_user_id(user_id)
    if linked is not None and linked.id != customer_id:
        return ValidationError(
            code=ErrorCode.INVALID_REFERENCE,
            message="That user account is already linked to another customer.",
            field="user_id",
        )
    return None


class CreateCustomerHandler:
    def __init__(
        self,
        customer_repo: CustomerRepository,
        user_repo: UserRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._user_repo = user_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: CreateCustomer) -> Result[Customer, DomainError]:
        grant = await self._access_policy.authorize(
            cmd.caller, Resource.CUSTOMERS, Action.CREATE
        )
        if isinstance(grant, Failure):
            return grant

        if await self._customer_repo.find_by_email(cmd.email) is not None:
            return Failure(error=_duplicate_email(cmd.email))

        if cmd.user_id is not None:
            link_error = await _check_user_link(
                self._user_repo, self._customer_repo, cmd.user_id, None
            )
            if link_error is not None:
                return Failure(error=link_error)

        saved = await self._customer_repo.save(
            Customer(
                name=cmd.name,
                email=cmd.email,
                phone=cmd.phone,
                user_id=cmd.user_id,
            )
        )
        self._logger.info("customer_created", customer_id=saved.id)
        return Success(value=saved)


class UpdateCustomerHandler:
    """Replace a customer's details, keeping the account link unless given."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        user_repo: UserRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._user_repo = user_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: UpdateCustomer) -> Result[Customer, DomainError]:
        if cmd.customer_id != cmd.payload_id:
            return Failure(error=id_mismatch("Customer"))

        grant = await self._access_policy.authorize(
            cmd.caller, Resource.CUSTOMERS, Action.UPDATE
        )
        if isinstance(grant, Failure):
            return grant

        current = await self._customer_repo.find_by_id(cmd.customer_id)
        if current is None:
            return Failure(error=not_found("Customer", cmd.customer_id))

        checked = self._access_policy.authorize_target(grant.value, current)
        if isinstance(checked, Failure):
            return checked

        same_email = await self._customer_repo.find_by_email(cmd.email)
        if same_email is not None and same_email.id != current.id:
            return Failure(error=_duplicate_email(cmd.email))

        user_id = current.user_id
        if cmd.user_id is not None and cmd.user_id != current.user_id:
            link_error = await _check_user_link(
                self._user_repo, self._customer_repo, cmd.user_id, current.id
            )
            if link_error is not None:
                return Failure(error=link_error)
            user_id = cmd.user_id

        updated = await self._customer_repo.update(
            Customer(
                id=current.id,
                name=cmd.name,
                email=cmd.email,
                phone=cmd.phone,
                user_id=user_id,
            )
        )
        self._logger.info("customer_updated", customer_id=updated.id)
        return Success(value=updated)


class DeleteCustomerHandler:
    """Delete a customer that has no dogs."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        dog_repo: DogRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._dog_repo = dog_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: DeleteCustomer) -> Result[None, DomainError]:
        grant = await self._access_policy.authorize(
            cmd.caller, Resource.CUSTOMERS, Action.DELETE
        )
        if isinstance(grant, Failure):
            return grant

        customer = await self._customer_repo.find_by_id(cmd.customer_id)
        if customer is None:
            return Failure(error=not_found("Customer", cmd.customer_id))

        dog_count = await self._dog_repo.count_by_customer(cmd.customer_id)
        if dog_count > 0:
            self._logger.warning(
                "customer_delete_blocked",
                customer_id=cmd.customer_id,
                dog_count=dog_count,
            )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.CUSTOMER_HAS_DOGS,
                    message=(
                        f"Cannot delete customer '{customer.name}' because they have "
                        f"{dog_count} dog(s) registered. Please reassign or remove "
                        "their dogs first."
                    ),
                    resource_type="Customer",
                    dependent_count=dog_count,
                )
            )

        await self._customer_repo.delete(cmd.customer_id)
        self._logger.info("customer_deleted", customer_id=cmd.customer_id)
        return Success(value=None)
