"""Users resource handlers (Admin only, plus self-read).

Handlers:
    list_users, get_user, create_user, update_user, change_user_role,
    delete_user
"""

from uuid import UUID

from fastapi import Depends, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.user_handlers import (
    ChangeUserRoleHandler,
    CreateUserHandler,
    DeleteUserHandler,
    UpdateUserHandler,
)
from src.application.commands.user_commands import (
    ChangeUserRole,
    CreateUser,
    DeleteUser,
    UpdateUser,
)
from src.application.queries.handlers.resource_queries import (
    GetUserHandler,
    ListUsersHandler,
)
from src.application.queries.user_queries import GetUser, ListUsers
from src.core.container import (
    get_change_user_role_handler,
    get_create_user_handler,
    get_delete_user_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_update_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import CallerDep
from src.schemas.user_schemas import (
    UserCreateRequest,
    UserResponse,
    UserRoleRequest,
    UserUpdateRequest,
)


async def list_users(
    caller: CallerDep,
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> list[UserResponse] | JSONResponse:
    match await handler.handle(ListUsers(caller=caller)):
        case Success(value=users):
            return [UserResponse.from_entity(u) for u in users]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def get_user(
    user_id: UUID,
    caller: CallerDep,
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> UserResponse | JSONResponse:
    match await handler.handle(GetUser(caller=caller, user_id=user_id)):
        case Success(value=user):
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def create_user(
    data: UserCreateRequest,
    caller: CallerDep,
    handler: CreateUserHandler = Depends(get_create_user_handler),
) -> UserResponse | JSONResponse:
    command = CreateUser(
        caller=caller,
        email=data.email,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
        role=data.role,
    )
    match await handler.handle(command):
        case Success(value=user):
            return UserResponse.from_entity(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def update_user(
    user_id: UUID,
    data: UserUpdateRequest,
    caller: CallerDep,
    handler: UpdateUserHandler = Depends(get_update_user_handler),
) -> Response:
    command = UpdateUser(
        caller=caller,
        user_id=user_id,
        payload_id=data.id,
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        role=data.role,
    )
    match await handler.handle(command):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def change_user_role(
    user_id: UUID,
    data: UserRoleRequest,
    caller: CallerDep,
    handler: ChangeUserRoleHandler = Depends(get_change_user_role_handler),
) -> Response:
    command = ChangeUserRole(caller=caller, user_id=user_id, new_role=data.role)
    match await handler.handle(command):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def delete_user(
    user_id: UUID,
    caller: CallerDep,
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> Response:
    match await handler.handle(DeleteUser(caller=caller, user_id=user_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
