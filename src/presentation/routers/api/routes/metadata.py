"""Route metadata types for the API route registry.

The registry is the single source of truth for every endpoint: method,
path, endpoint function, response model, status code, authentication
level and OpenAPI documentation.

Usage:
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/dogs",
        handler=list_dogs,
        resource="dogs",
        tags=["Dogs"],
        summary="List dogs",
        response_model=list[DogResponse],
        auth_level=AuthLevel.AUTHENTICATED,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No token required (register, login, health)
        AUTHENTICATED: Valid JWT required; role and ownership checks
            happen in the access policy
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response entry for OpenAPI documentation.

    Examples:
        >>> ErrorSpec(status=404, description="Dog not found")
    """

    status: int
    description: str


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete description of an API route.

    Attributes:
        method: HTTP method.
        path: Path relative to the API prefix, e.g. "/dogs/{dog_id}".
        handler: Async endpoint function.
        resource: Resource category used for grouping.
        tags: OpenAPI tags.
        summary: Short OpenAPI summary.
        response_model: Model (or ``list[Model]``) for the success body.
        status_code: Success status.
        errors: Documented error responses.
        auth_level: Authentication requirement.
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    resource: str
    tags: Sequence[str]

    summary: str
    description: str | None = None
    operation_id: str | None = None

    response_model: Any = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    auth_level: AuthLevel = AuthLevel.AUTHENTICATED
