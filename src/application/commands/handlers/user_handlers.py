"""User management handlers (Admin only).

Creation shares provisioning with registration. Deleting a user also
removes their customer profile, unless that profile still has dogs.
"""

from dataclasses import replace

from src.application.commands.user_commands import (
    ChangeUserRole,
    CreateUser,
    DeleteUser,
    UpdateUser,
)
from src.application.errors import id_mismatch, not_found
from src.application.services.access_policy import AccessPolicy
from src.application.services.user_provisioning import (
    UserProvisioner,
    invalid_role_error,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import Action, Resource, UserRole
from src.domain.protocols import (
    CustomerRepository,
    DogRepository,
    LoggerProtocol,
    UserRepository,
)


def _email_in_use(email: str) -> ValidationError:
    return ValidationError(
        code=ErrorCode.EMAIL_ALREADY_REGISTERED,
        message=f"Email '{email}' is already in use.",
        field="email",
    )


class CreateUserHandler:
    def __init__(
        self,
        user_repo: UserRepository,
        provisioner: UserProvisioner,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._provisioner = provisioner
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[User, DomainError]:
        grant = await self._access_policy.authorize(cmd.caller, Resource.USERS, Action.CREATE)
        if isinstance(grant, Failure):
            return grant

        if await self._user_repo.find_by_email(cmd.email) is not None:
            return Failure(error=_email_in_use(cmd.email))

        return await self._provisioner.provision(
            email=cmd.email,
            password=cmd.password,
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            role_name=cmd.role,
        )


class UpdateUserHandler:
    def __init__(
        self,
        user_repo: UserRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: UpdateUser) -> Result[User, DomainError]:
        if cmd.user_id != cmd.payload_id:
            return Failure(error=id_mismatch("User"))

        grant = await self._access_policy.authorize(cmd.caller, Resource.USERS, Action.UPDATE)
        if isinstance(grant, Failure):
            return grant

        current = await self._user_repo.find_by_id(cmd.user_id)
        if current is None:
            return Failure(error=not_found("User", cmd.user_id))

        checked = self._access_policy.authorize_target(grant.value, current)
        if isinstance(checked, Failure):
            return checked

        same_email = await self._user_repo.find_by_email(cmd.email)
        if same_email is not None and same_email.id != current.id:
            return Failure(error=_email_in_use(cmd.email))

        role = current.role
        if cmd.role is not None:
            parsed = UserRole.parse(cmd.role)
            if parsed is None:
                return Failure(error=invalid_role_error(cmd.role))
            role = parsed

        updated = replace(
            current,
            first_name=cmd.first_name.strip(),
            last_name=cmd.last_name.strip(),
            email=cmd.email,
            role=role,
        )
        await self._user_repo.update(updated)
        self._logger.info("user_updated", user_id=str(updated.id), role=role.value)
        return Success(value=updated)


class ChangeUserRoleHandler:
    """Replace a user's role.

    Moving a user to the Customer role does not create a profile; an
    Admin links one through the customers endpoints.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: ChangeUserRole) -> Result[None, DomainError]:
        grant = await self._access_policy.authorize(cmd.caller, Resource.USERS, Action.UPDATE)
        if isinstance(grant, Failure):
            return grant

        role = UserRole.parse(cmd.new_role)
        if role is None:
            return Failure(error=invalid_role_error(cmd.new_role))

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=not_found("User", cmd.user_id))

        previous = user.role
        user.change_role(role)
        await self._user_repo.update(user)
        self._logger.info(
            "user_role_changed",
            user_id=str(user.id),
            old_role=previous.value,
            new_role=role.value,
        )
        return Success(value=None)


class DeleteUserHandler:
    def __init__(
        self,
        user_repo: UserRepository,
        customer_repo: CustomerRepository,
        dog_repo: DogRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._customer_repo = customer_repo
        self._dog_repo = dog_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[None, DomainError]:
        grant = await self._access_policy.authorize(cmd.caller, Resource.USERS, Action.DELETE)
        if isinstance(grant, Failure):
            return grant

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=not_found("User", cmd.user_id))

        checked = self._access_policy.authorize_target(grant.value, user)
        if isinstance(checked, Failure):
            return checked

        profile = await self._customer_repo.find_by_user_id(user.id)
        if profile is not None and profile.id is not None:
            dog_count = await self._dog_repo.count_by_customer(profile.id)
            if dog_count > 0:
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.CUSTOMER_HAS_DOGS,
                        message=(
                            f"Cannot delete user '{user.display_name}' because they "
                            f"have {dog_count} dog(s) registered. Please reassign or "
                            "remove their dogs first."
                        ),
                        resource_type="User",
                        dependent_count=dog_count,
                    )
                )
            await self._customer_repo.delete(profile.id)

        await self._user_repo.delete(user.id)
        self._logger.info("user_deleted", user_id=str(user.id))
        return Success(value=None)
