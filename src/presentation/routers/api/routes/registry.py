"""API route registry - single source of truth for all routes.

Paths are relative to the API prefix (``settings.api_prefix``, "/api"
by default). Only registration and login are public; every other route
requires a bearer token, and role/ownership checks happen in the access
policy behind each handler.

Usage:
    router = APIRouter(prefix=settings.api_prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.auth import login, register
from src.presentation.routers.api.bookings import (
    create_booking,
    delete_booking,
    get_booking,
    list_bookings,
    update_booking,
)
from src.presentation.routers.api.customers import (
    create_customer,
    delete_customer,
    get_customer,
    list_customers,
    update_customer,
)
from src.presentation.routers.api.dogs import (
    create_dog,
    delete_dog,
    get_dog,
    list_dogs,
    update_dog,
)
from src.presentation.routers.api.kennels import (
    create_kennel,
    delete_kennel,
    get_kennel,
    list_kennels,
    update_kennel,
)
from src.presentation.routers.api.routes.metadata import (
    AuthLevel,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from src.presentation.routers.api.users import (
    change_user_role,
    create_user,
    delete_user,
    get_user,
    list_users,
    update_user,
)
from src.schemas.auth_schemas import LoginResponse
from src.schemas.booking_schemas import BookingResponse
from src.schemas.common_schemas import MessageResponse
from src.schemas.customer_schemas import CustomerResponse
from src.schemas.dog_schemas import DogResponse
from src.schemas.kennel_schemas import KennelResponse
from src.schemas.user_schemas import UserResponse

_UNAUTHORIZED = ErrorSpec(status=401, description="Missing, invalid or expired token")
_FORBIDDEN = ErrorSpec(status=403, description="Role or ownership denied")
_BAD_REQUEST = ErrorSpec(status=400, description="Validation error")


def _not_found(resource: str) -> ErrorSpec:
    return ErrorSpec(status=404, description=f"{resource} not found")


def _crud_routes(
    *,
    resource: str,
    label: str,
    id_param: str,
    response_model: type,
    list_handler,
    get_handler,
    create_handler,
    update_handler,
    delete_handler,
) -> list[RouteMetadata]:
    """The five standard routes of a resource collection."""
    tags = [label + "s"]
    item_path = f"/{resource}/{{{id_param}}}"
    return [
        RouteMetadata(
            method=HTTPMethod.GET,
            path=f"/{resource}",
            handler=list_handler,
            resource=resource,
            tags=tags,
            summary=f"List {resource}",
            operation_id=f"list_{resource}",
            response_model=list[response_model],
            errors=[_UNAUTHORIZED, _FORBIDDEN],
        ),
        RouteMetadata(
            method=HTTPMethod.GET,
            path=item_path,
            handler=get_handler,
            resource=resource,
            tags=tags,
            summary=f"Get {label.lower()}",
            operation_id=f"get_{label.lower()}",
            response_model=response_model,
            errors=[_UNAUTHORIZED, _FORBIDDEN, _not_found(label)],
        ),
        RouteMetadata(
            method=HTTPMethod.POST,
            path=f"/{resource}",
            handler=create_handler,
            resource=resource,
            tags=tags,
            summary=f"Create {label.lower()}",
            operation_id=f"create_{label.lower()}",
            response_model=response_model,
            status_code=201,
            errors=[_BAD_REQUEST, _UNAUTHORIZED, _FORBIDDEN],
        ),
        RouteMetadata(
            method=HTTPMethod.PUT,
            path=item_path,
            handler=update_handler,
            resource=resource,
            tags=tags,
            summary=f"Replace {label.lower()}",
            description="The body id must equal the path id.",
            operation_id=f"update_{label.lower()}",
            status_code=204,
            errors=[_BAD_REQUEST, _UNAUTHORIZED, _FORBIDDEN, _not_found(label)],
        ),
        RouteMetadata(
            method=HTTPMethod.DELETE,
            path=item_path,
            handler=delete_handler,
            resource=resource,
            tags=tags,
            summary=f"Delete {label.lower()}",
            operation_id=f"delete_{label.lower()}",
            status_code=204,
            errors=[_BAD_REQUEST, _UNAUTHORIZED, _FORBIDDEN, _not_found(label)],
        ),
    ]


ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Auth (public)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/register",
        handler=register,
        resource="auth",
        tags=["Auth"],
        summary="Register",
        description="Create an account. Customer accounts get a linked customer profile.",
        operation_id="register",
        response_model=MessageResponse,
        errors=[_BAD_REQUEST],
        auth_level=AuthLevel.PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/login",
        handler=login,
        resource="auth",
        tags=["Auth"],
        summary="Login",
        description="Exchange email and password for a JWT access token.",
        operation_id="login",
        response_model=LoginResponse,
        errors=[_BAD_REQUEST, ErrorSpec(status=401, description="Invalid credentials")],
        auth_level=AuthLevel.PUBLIC,
    ),
    # =========================================================================
    # Resource collections
    # =========================================================================
    *_crud_routes(
        resource="customers",
        label="Customer",
        id_param="customer_id",
        response_model=CustomerResponse,
        list_handler=list_customers,
        get_handler=get_customer,
        create_handler=create_customer,
        update_handler=update_customer,
        delete_handler=delete_customer,
    ),
    *_crud_routes(
        resource="dogs",
        label="Dog",
        id_param="dog_id",
        response_model=DogResponse,
        list_handler=list_dogs,
        get_handler=get_dog,
        create_handler=create_dog,
        update_handler=update_dog,
        delete_handler=delete_dog,
    ),
    *_crud_routes(
        resource="kennels",
        label="Kennel",
        id_param="kennel_id",
        response_model=KennelResponse,
        list_handler=list_kennels,
        get_handler=get_kennel,
        create_handler=create_kennel,
        update_handler=update_kennel,
        delete_handler=delete_kennel,
    ),
    *_crud_routes(
        resource="bookings",
        label="Booking",
        id_param="booking_id",
        response_model=BookingResponse,
        list_handler=list_bookings,
        get_handler=get_booking,
        create_handler=create_booking,
        update_handler=update_booking,
        delete_handler=delete_booking,
    ),
    *_crud_routes(
        resource="users",
        label="User",
        id_param="user_id",
        response_model=UserResponse,
        list_handler=list_users,
        get_handler=get_user,
        create_handler=create_user,
        update_handler=update_user,
        delete_handler=delete_user,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/users/{user_id}/role",
        handler=change_user_role,
        resource="users",
        tags=["Users"],
        summary="Change user role",
        operation_id="change_user_role",
        status_code=204,
        errors=[_BAD_REQUEST, _UNAUTHORIZED, _FORBIDDEN, _not_found("User")],
    ),
]
