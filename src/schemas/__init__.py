"""Request/response schemas for API endpoints.

Schemas are HTTP-layer concerns, kept separate from domain entities.

Usage:
    from src.schemas import DogCreateRequest, DogResponse
"""

from src.schemas.auth_schemas import LoginRequest, LoginResponse, RegisterRequest
from src.schemas.booking_schemas import (
    BookingCreateRequest,
    BookingResponse,
    BookingUpdateRequest,
)
from src.schemas.common_schemas import ErrorResponse, HealthResponse, MessageResponse
from src.schemas.customer_schemas import (
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)
from src.schemas.dog_schemas import DogCreateRequest, DogResponse, DogUpdateRequest
from src.schemas.kennel_schemas import (
    KennelCreateRequest,
    KennelResponse,
    KennelUpdateRequest,
)
from src.schemas.user_schemas import (
    UserCreateRequest,
    UserResponse,
    UserRoleRequest,
    UserUpdateRequest,
)

__all__ = [
    "BookingCreateRequest",
    "BookingResponse",
    "BookingUpdateRequest",
    "CustomerCreateRequest",
    "CustomerResponse",
    "CustomerUpdateRequest",
    "DogCreateRequest",
    "DogResponse",
    "DogUpdateRequest",
    "ErrorResponse",
    "HealthResponse",
    "KennelCreateRequest",
    "KennelResponse",
    "KennelUpdateRequest",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "UserCreateRequest",
    "UserResponse",
    "UserRoleRequest",
    "UserUpdateRequest",
]
