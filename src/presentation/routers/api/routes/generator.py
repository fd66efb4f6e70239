"""Route generator for the API route registry.

Converts RouteMetadata entries into FastAPI routes at startup.

Usage:
    api_router = APIRouter(prefix=settings.api_prefix)
    register_routes_from_registry(api_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_caller,
)
from src.presentation.routers.api.routes.metadata import (
    AuthLevel,
    ErrorSpec,
    RouteMetadata,
)
from src.schemas.common_schemas import ErrorResponse


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata."""
    for metadata in registry:
        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata.errors) if metadata.errors else None,
            dependencies=_build_dependencies(metadata.auth_level),
        )


def _build_dependencies(auth_level: AuthLevel) -> list[Any]:
    """Route-level dependencies for an authentication level.

    PUBLIC: none
    AUTHENTICATED: Depends(get_current_caller), 401 without a valid token
    """
    match auth_level:
        case AuthLevel.PUBLIC:
            return []
        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_caller)]
        case _:
            msg = f"Unknown auth level: {auth_level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    return {
        error.status: {"description": error.description, "model": ErrorResponse}
        for error in errors
    }
