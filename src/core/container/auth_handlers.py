"""Authentication and user-management handler factories.

Request-scoped handler instances:
- Registration and login
- Admin user management (create, update, change role, delete, list, get)
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.authorization import get_access_policy
from src.core.container.infrastructure import (
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import (
    get_customer_repository,
    get_dog_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.commands.handlers.user_handlers import (
        ChangeUserRoleHandler,
        CreateUserHandler,
        DeleteUserHandler,
        UpdateUserHandler,
    )
    from src.application.queries.handlers.resource_queries import (
        GetUserHandler,
        ListUsersHandler,
    )
    from src.application.services.access_policy import AccessPolicy
    from src.application.services.user_provisioning import UserProvisioner
    from src.infrastructure.persistence.repositories import (
        CustomerRepository,
        DogRepository,
        UserRepository,
    )


async def get_user_provisioner(
    user_repo: "UserRepository" = Depends(get_user_repository),
    customer_repo: "CustomerRepository" = Depends(get_customer_repository),
) -> "UserProvisioner":
    from src.application.services.user_provisioning import UserProvisioner

    return UserProvisioner(
        user_repo=user_repo,
        customer_repo=customer_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_register_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    provisioner: "UserProvisioner" = Depends(get_user_provisioner),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Usage:
        handler: RegisterUserHandler = Depends(get_register_user_handler)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )

    return RegisterUserHandler(
        user_repo=user_repo,
        provisioner=provisioner,
        logger=get_logger(),
    )


async def get_login_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "LoginUserHandler":
    from src.application.commands.handlers.login_user_handler import LoginUserHandler

    return LoginUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_create_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    provisioner: "UserProvisioner" = Depends(get_user_provisioner),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "CreateUserHandler":
    from src.application.commands.handlers.user_handlers import CreateUserHandler

    return CreateUserHandler(
        user_repo=user_repo,
        provisioner=provisioner,
        access_policy=access_policy,
        logger=get_logger(),
    )


async def get_update_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "UpdateUserHandler":
    from src.application.commands.handlers.user_handlers import UpdateUserHandler

    return UpdateUserHandler(
        user_repo=user_repo, access_policy=access_policy, logger=get_logger()
    )


async def get_change_user_role_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "ChangeUserRoleHandler":
    from src.application.commands.handlers.user_handlers import ChangeUserRoleHandler

    return ChangeUserRoleHandler(
        user_repo=user_repo, access_policy=access_policy, logger=get_logger()
    )


async def get_delete_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    customer_repo: "CustomerRepository" = Depends(get_customer_repository),
    dog_repo: "DogRepository" = Depends(get_dog_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "DeleteUserHandler":
    from src.application.commands.handlers.user_handlers import DeleteUserHandler

    return DeleteUserHandler(
        user_repo=user_repo,
        customer_repo=customer_repo,
        dog_repo=dog_repo,
        access_policy=access_policy,
        logger=get_logger(),
    )


async def get_list_users_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "ListUsersHandler":
    from src.application.queries.handlers.resource_queries import ListUsersHandler

    return ListUsersHandler(user_repo, access_policy)


async def get_get_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    access_policy: "AccessPolicy" = Depends(get_access_policy),
) -> "GetUserHandler":
    from src.application.queries.handlers.resource_queries import GetUserHandler

    return GetUserHandler(user_repo, access_policy)
