"""Authentication endpoints.

Handlers:
    register - POST /auth/register → 200 {"message"}
    login    - POST /auth/login    → 200 {"token", "email", "role"}
"""

from fastapi import Depends
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.core.container import get_login_user_handler, get_register_user_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import LoginRequest, LoginResponse, RegisterRequest
from src.schemas.common_schemas import MessageResponse


async def register(
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> MessageResponse | JSONResponse:
    """Create an account. No token is issued; the client logs in next."""
    command = RegisterUser(
        email=data.email,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
        role=data.role,
    )

    match await handler.handle(command):
        case Success(value=message):
            return MessageResponse(message=message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


async def login(
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> LoginResponse | JSONResponse:
    match await handler.handle(LoginUser(email=data.email, password=data.password)):
        case Success(value=result):
            return LoginResponse(token=result.token, email=result.email, role=result.role)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
