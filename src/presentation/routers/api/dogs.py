"""Dogs resource handlers.

Customer callers are scoped to their own dogs: lists are filtered, reads
and updates of other dogs are forbidden, and creates are always assigned
to their own profile.
"""

from fastapi import Depends, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.dog_commands import CreateDog, DeleteDog, UpdateDog
from src.application.commands.handlers.dog_handlers import (
    CreateDogHandler,
    DeleteDogHandler,
    UpdateDogHandler,
)
from src.application.queries.dog_queries import GetDog, ListDogs
from src.application.queries.handlers.resource_queries import (
    GetDogHandler,
    ListDogsHandler,
)
from src.core.container import (
    get_create_dog_handler,
    get_delete_dog_handler,
    get_get_dog_handler,
    get_list_dogs_handler,
    get_update_dog_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import CallerDep
from src.schemas.dog_schemas import DogCreateRequest, DogResponse, DogUpdateRequest


async def list_dogs(
    caller: CallerDep,
    handler: ListDogsHandler = Depends(get_list_dogs_handler),
) -> list[DogResponse] | JSONResponse:
    match await handler.handle(ListDogs(caller=caller)):
        case Success(value=dogs):
            return [DogResponse.from_entity(d) for d in dogs]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def get_dog(
    dog_id: int,
    caller: CallerDep,
    handler: GetDogHandler = Depends(get_get_dog_handler),
) -> DogResponse | JSONResponse:
    match await handler.handle(GetDog(caller=caller, dog_id=dog_id)):
        case Success(value=dog):
            return DogResponse.from_entity(dog)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def create_dog(
    data: DogCreateRequest,
    caller: CallerDep,
    handler: CreateDogHandler = Depends(get_create_dog_handler),
) -> DogResponse | JSONResponse:
    command = CreateDog(
        caller=caller,
        name=data.name,
        breed=data.breed,
        age=data.age,
        customer_id=data.customer_id,
    )
    match await handler.handle(command):
        case Success(value=dog):
            return DogResponse.from_entity(dog)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def update_dog(
    dog_id: int,
    data: DogUpdateRequest,
    caller: CallerDep,
    handler: UpdateDogHandler = Depends(get_update_dog_handler),
) -> Response:
    command = UpdateDog(
        caller=caller,
        dog_id=dog_id,
        payload_id=data.id,
        name=data.name,
        breed=data.breed,
        age=data.age,
        customer_id=data.customer_id,
    )
    match await handler.handle(command):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def delete_dog(
    dog_id: int,
    caller: CallerDep,
    handler: DeleteDogHandler = Depends(get_delete_dog_handler),
) -> Response:
    match await handler.handle(DeleteDog(caller=caller, dog_id=dog_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
