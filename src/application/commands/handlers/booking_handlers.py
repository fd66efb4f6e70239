"""Booking command handlers.

Bookings reference a dog and a kennel. Customer callers may only book
(or rebook) their own dogs; dates must not run backwards.
"""

from src.application.commands.booking_commands import (
    CreateBooking,
    DeleteBooking,
    UpdateBooking,
)
from src.application.errors import id_mismatch, invalid_reference, not_found
from src.application.services.access_policy import AccessPolicy
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Booking
from src.domain.enums import Action, Resource
from src.domain.protocols import (
    BookingRepository,
    DogRepository,
    KennelRepository,
    LoggerProtocol,
)


async def _validate_booking(
    booking: Booking,
    dog_repo: DogRepository,
    kennel_repo: KennelRepository,
) -> ValidationError | None:
    if not booking.has_valid_dates():
        return ValidationError(
            code=ErrorCode.INVALID_DATE_RANGE,
            message="Check-out date cannot be before check-in date.",
            field="check_out_date",
        )
    if await dog_repo.find_by_id(booking.dog_id) is None:
        return invalid_reference("Dog", booking.dog_id)
    if await kennel_repo.find_by_id(booking.kennel_id) is None:
        return invalid_reference("Kennel", booking.kennel_id)
    return None


class CreateBookingHandler:
    def __init__(
        self,
        booking_repo: BookingRepository,
        dog_repo: DogRepository,
        kennel_repo: KennelRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._booking_repo = booking_repo
        self._dog_repo = dog_repo
        self._kennel_repo = kennel_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: CreateBooking) -> Result[Booking, DomainError]:
        grant = await self._access_policy.authorize(
            cmd.caller, Resource.BOOKINGS, Action.CREATE
        )
        if isinstance(grant, Failure):
            return grant

        checked = self._access_policy.authorize_target(
            grant.value,
            Booking(
                dog_id=cmd.dog_id,
                kennel_id=cmd.kennel_id,
                check_in_date=cmd.check_in_date,
                check_out_date=cmd.check_out_date,
                total_cost=cmd.total_cost,
                status=cmd.status,
            ),
        )
        if isinstance(checked, Failure):
            return checked

        invalid = await _validate_booking(checked.value, self._dog_repo, self._kennel_repo)
        if invalid is not None:
            return Failure(error=invalid)

        saved = await self._booking_repo.save(checked.value)
        self._logger.info(
            "booking_created",
            booking_id=saved.id,
            dog_id=saved.dog_id,
            kennel_id=saved.kennel_id,
        )
        return Success(value=saved)


class UpdateBookingHandler:
    def __init__(
        self,
        booking_repo: BookingRepository,
        dog_repo: DogRepository,
        kennel_repo: KennelRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._booking_repo = booking_repo
        self._dog_repo = dog_repo
        self._kennel_repo = kennel_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: UpdateBooking) -> Result[Booking, DomainError]:
        if cmd.booking_id != cmd.payload_id:
            return Failure(error=id_mismatch("Booking"))

        grant = await self._access_policy.authorize(
            cmd.caller, Resource.BOOKINGS, Action.UPDATE
        )
        if isinstance(grant, Failure):
            return grant

        current = await self._booking_repo.find_by_id(cmd.booking_id)
        if current is None:
            return Failure(error=not_found("Booking", cmd.booking_id))

        checked = self._access_policy.authorize_target(
            grant.value,
            Booking(
                id=cmd.booking_id,
                dog_id=cmd.dog_id,
                kennel_id=cmd.kennel_id,
                check_in_date=cmd.check_in_date,
                check_out_date=cmd.check_out_date,
                total_cost=cmd.total_cost,
                status=cmd.status,
            ),
            current=current,
        )
        if isinstance(checked, Failure):
            return checked

        invalid = await _validate_booking(checked.value, self._dog_repo, self._kennel_repo)
        if invalid is not None:
            return Failure(error=invalid)

        updated = await self._booking_repo.update(checked.value)
        self._logger.info("booking_updated", booking_id=updated.id)
        return Success(value=updated)


class DeleteBookingHandler:
    def __init__(
        self,
        booking_repo: BookingRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._booking_repo = booking_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: DeleteBooking) -> Result[None, DomainError]:
        grant = await self._access_policy.authorize(
            cmd.caller, Resource.BOOKINGS, Action.DELETE
        )
        if isinstance(grant, Failure):
            return grant

        if await self._booking_repo.find_by_id(cmd.booking_id) is None:
            return Failure(error=not_found("Booking", cmd.booking_id))

        await self._booking_repo.delete(cmd.booking_id)
        self._logger.info("booking_deleted", booking_id=cmd.booking_id)
        return Success(value=None)
