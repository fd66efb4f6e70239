"""Kennels resource handlers (Admin and Staff)."""

from fastapi import Depends, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.kennel_handlers import (
    CreateKennelHandler,
    DeleteKennelHandler,
    UpdateKennelHandler,
)
from src.application.commands.kennel_commands import (
    CreateKennel,
    DeleteKennel,
    UpdateKennel,
)
from src.application.queries.handlers.resource_queries import (
    GetKennelHandler,
    ListKennelsHandler,
)
from src.application.queries.kennel_queries import GetKennel, ListKennels
from src.core.container import (
    get_create_kennel_handler,
    get_delete_kennel_handler,
    get_get_kennel_handler,
    get_list_kennels_handler,
    get_update_kennel_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import CallerDep
from src.schemas.kennel_schemas import (
    KennelCreateRequest,
    KennelResponse,
    KennelUpdateRequest,
)


async def list_kennels(
    caller: CallerDep,
    handler: ListKennelsHandler = Depends(get_list_kennels_handler),
) -> list[KennelResponse] | JSONResponse:
    match await handler.handle(ListKennels(caller=caller)):
        case Success(value=kennels):
            return [KennelResponse.from_entity(k) for k in kennels]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def get_kennel(
    kennel_id: int,
    caller: CallerDep,
    handler: GetKennelHandler = Depends(get_get_kennel_handler),
) -> KennelResponse | JSONResponse:
    match await handler.handle(GetKennel(caller=caller, kennel_id=kennel_id)):
        case Success(value=kennel):
            return KennelResponse.from_entity(kennel)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def create_kennel(
    data: KennelCreateRequest,
    caller: CallerDep,
    handler: CreateKennelHandler = Depends(get_create_kennel_handler),
) -> KennelResponse | JSONResponse:
    command = CreateKennel(
        caller=caller,
        name=data.name,
        size=data.size,
        is_available=data.is_available,
        price_per_day=data.price_per_day,
    )
    match await handler.handle(command):
        case Success(value=kennel):
            return KennelResponse.from_entity(kennel)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def update_kennel(
    kennel_id: int,
    data: KennelUpdateRequest,
    caller: CallerDep,
    handler: UpdateKennelHandler = Depends(get_update_kennel_handler),
) -> Response:
    command = UpdateKennel(
        caller=caller,
        kennel_id=kennel_id,
        payload_id=data.id,
        name=data.name,
        size=data.size,
        is_available=data.is_available,
        price_per_day=data.price_per_day,
    )
    match await handler.handle(command):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def delete_kennel(
    kennel_id: int,
    caller: CallerDep,
    handler: DeleteKennelHandler = Depends(get_delete_kennel_handler),
) -> Response:
    match await handler.handle(DeleteKennel(caller=caller, kennel_id=kennel_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
