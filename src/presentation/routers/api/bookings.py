"""Bookings resource handlers.

Customer callers see and book only their own dogs. Deleting bookings is
reserved to Admin.
"""

from fastapi import Depends, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.booking_commands import (
    CreateBooking,
    DeleteBooking,
    UpdateBooking,
)
from src.application.commands.handlers.booking_handlers import (
    CreateBookingHandler,
    DeleteBookingHandler,
    UpdateBookingHandler,
)
from src.application.queries.booking_queries import GetBooking, ListBookings
from src.application.queries.handlers.resource_queries import (
    GetBookingHandler,
    ListBookingsHandler,
)
from src.core.container import (
    get_create_booking_handler,
    get_delete_booking_handler,
    get_get_booking_handler,
    get_list_bookings_handler,
    get_update_booking_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import CallerDep
from src.schemas.booking_schemas import (
    BookingCreateRequest,
    BookingResponse,
    BookingUpdateRequest,
)


async def list_bookings(
    caller: CallerDep,
    handler: ListBookingsHandler = Depends(get_list_bookings_handler),
) -> list[BookingResponse] | JSONResponse:
    match await handler.handle(ListBookings(caller=caller)):
        case Success(value=bookings):
            return [BookingResponse.from_entity(b) for b in bookings]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def get_booking(
    booking_id: int,
    caller: CallerDep,
    handler: GetBookingHandler = Depends(get_get_booking_handler),
) -> BookingResponse | JSONResponse:
    match await handler.handle(GetBooking(caller=caller, booking_id=booking_id)):
        case Success(value=booking):
            return BookingResponse.from_entity(booking)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def create_booking(
    data: BookingCreateRequest,
    caller: CallerDep,
    handler: CreateBookingHandler = Depends(get_create_booking_handler),
) -> BookingResponse | JSONResponse:
    command = CreateBooking(
        caller=caller,
        dog_id=data.dog_id,
        kennel_id=data.kennel_id,
        check_in_date=data.check_in_date,
        check_out_date=data.check_out_date,
        total_cost=data.total_cost,
        status=data.status,
    )
    match await handler.handle(command):
        case Success(value=booking):
            return BookingResponse.from_entity(booking)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def update_booking(
    booking_id: int,
    data: BookingUpdateRequest,
    caller: CallerDep,
    handler: UpdateBookingHandler = Depends(get_update_booking_handler),
) -> Response:
    command = UpdateBooking(
        caller=caller,
        booking_id=booking_id,
        payload_id=data.id,
        dog_id=data.dog_id,
        kennel_id=data.kennel_id,
        check_in_date=data.check_in_date,
        check_out_date=data.check_out_date,
        total_cost=data.total_cost,
        status=data.status,
    )
    match await handler.handle(command):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def delete_booking(
    booking_id: int,
    caller: CallerDep,
    handler: DeleteBookingHandler = Depends(get_delete_booking_handler),
) -> Response:
    match await handler.handle(DeleteBooking(caller=caller, booking_id=booking_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
