"""API routers.

All routes are generated from ROUTE_REGISTRY (routes/registry.py) under
the configurable prefix:

    /api/auth       - register, login
    /api/customers  - customer records
    /api/dogs       - dogs
    /api/kennels    - kennels
    /api/bookings   - bookings
    /api/users      - user management
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY


def build_api_router(prefix: str | None = None) -> APIRouter:
    router = APIRouter(prefix=settings.api_prefix if prefix is None else prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
    return router


api_router = build_api_router()

__all__ = ["ROUTE_REGISTRY", "api_router", "build_api_router"]
