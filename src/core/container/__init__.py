"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from src.core.container import get_logger, get_create_dog_handler

Modules:
- infrastructure: database, logging, password hashing, JWT (singletons)
- authorization: Casbin role matrix and request-scoped access policy
- repositories: request-scoped repository factories
- auth_handlers: registration, login and user management handlers
- data_handlers: customer, dog, kennel and booking handlers
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

# Authorization
from src.core.container.authorization import (
    get_access_policy,
    get_enforcer,
    get_role_matrix,
)

# Repositories
from src.core.container.repositories import (
    get_booking_repository,
    get_customer_repository,
    get_dog_repository,
    get_kennel_repository,
    get_user_repository,
)

# Auth and user handlers
from src.core.container.auth_handlers import (
    get_change_user_role_handler,
    get_create_user_handler,
    get_delete_user_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_login_user_handler,
    get_register_user_handler,
    get_update_user_handler,
    get_user_provisioner,
)

# Data handlers
from src.core.container.data_handlers import (
    get_create_booking_handler,
    get_create_customer_handler,
    get_create_dog_handler,
    get_create_kennel_handler,
    get_delete_booking_handler,
    get_delete_customer_handler,
    get_delete_dog_handler,
    get_delete_kennel_handler,
    get_get_booking_handler,
    get_get_customer_handler,
    get_get_dog_handler,
    get_get_kennel_handler,
    get_list_bookings_handler,
    get_list_customers_handler,
    get_list_dogs_handler,
    get_list_kennels_handler,
    get_update_booking_handler,
    get_update_customer_handler,
    get_update_dog_handler,
    get_update_kennel_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Authorization
    "get_access_policy",
    "get_enforcer",
    "get_role_matrix",
    # Repositories
    "get_booking_repository",
    "get_customer_repository",
    "get_dog_repository",
    "get_kennel_repository",
    "get_user_repository",
    # Auth and users
    "get_change_user_role_handler",
    "get_create_user_handler",
    "get_delete_user_handler",
    "get_get_user_handler",
    "get_list_users_handler",
    "get_login_user_handler",
    "get_register_user_handler",
    "get_update_user_handler",
    "get_user_provisioner",
    # Data
    "get_create_booking_handler",
    "get_create_customer_handler",
    "get_create_dog_handler",
    "get_create_kennel_handler",
    "get_delete_booking_handler",
    "get_delete_customer_handler",
    "get_delete_dog_handler",
    "get_delete_kennel_handler",
    "get_get_booking_handler",
    "get_get_customer_handler",
    "get_get_dog_handler",
    "get_get_kennel_handler",
    "get_list_bookings_handler",
    "get_list_customers_handler",
    "get_list_dogs_handler",
    "get_list_kennels_handler",
    "get_update_booking_handler",
    "get_update_customer_handler",
    "get_update_dog_handler",
    "get_update_kennel_handler",
]
