"""Kennel command handlers.

Kennels are operational data: Admin and Staff manage them, Customer
callers are denied by the role matrix.
"""

from src.application.commands.kennel_commands import (
    CreateKennel,
    DeleteKennel,
    UpdateKennel,
)
from src.application.errors import id_mismatch, not_found
from src.application.services.access_policy import AccessPolicy
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Kennel
from src.domain.enums import Action, Resource
from src.domain.protocols import KennelRepository, LoggerProtocol


class CreateKennelHandler:
    def __init__(
        self,
        kennel_repo: KennelRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._kennel_repo = kennel_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: CreateKennel) -> Result[Kennel, DomainError]:
        grant = await self._access_policy.authorize(
            cmd.caller, Resource.KENNELS, Action.CREATE
        )
        if isinstance(grant, Failure):
            return grant

        saved = await self._kennel_repo.save(
            Kennel(
                name=cmd.name,
                size=cmd.size,
                is_available=cmd.is_available,
                price_per_day=cmd.price_per_day,
            )
        )
        self._logger.info("kennel_created", kennel_id=saved.id)
        return Success(value=saved)


class UpdateKennelHandler:
    def __init__(
        self,
        kennel_repo: KennelRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._kennel_repo = kennel_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: UpdateKennel) -> Result[Kennel, DomainError]:
        if cmd.kennel_id != cmd.payload_id:
            return Failure(error=id_mismatch("Kennel"))

        grant = await self._access_policy.authorize(
            cmd.caller, Resource.KENNELS, Action.UPDATE
        )
        if isinstance(grant, Failure):
            return grant

        if await self._kennel_repo.find_by_id(cmd.kennel_id) is None:
            return Failure(error=not_found("Kennel", cmd.kennel_id))

        updated = await self._kennel_repo.update(
            Kennel(
                id=cmd.kennel_id,
                name=cmd.name,
                size=cmd.size,
                is_available=cmd.is_available,
                price_per_day=cmd.price_per_day,
            )
        )
        self._logger.info("kennel_updated", kennel_id=updated.id)
        return Success(value=updated)


class DeleteKennelHandler:
    """Delete a kennel and its bookings."""

    def __init__(
        self,
        kennel_repo: KennelRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._kennel_repo = kennel_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: DeleteKennel) -> Result[None, DomainError]:
        grant = await self._access_policy.authorize(
            cmd.caller, Resource.KENNELS, Action.DELETE
        )
        if isinstance(grant, Failure):
            return grant

        if await self._kennel_repo.find_by_id(cmd.kennel_id) is None:
            return Failure(error=not_found("Kennel", cmd.kennel_id))

        await self._kennel_repo.delete(cmd.kennel_id)
        self._logger.info("kennel_deleted", kennel_id=cmd.kennel_id)
        return Success(value=None)
