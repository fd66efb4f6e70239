"""System router: health check.

Lightweight and side-effect free apart from a database ping.
"""

from fastapi import APIRouter

from src.core.container import get_database
from src.schemas.common_schemas import HealthResponse

system_router = APIRouter(tags=["System"])


@system_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check for monitoring and load balancers.

    Reports "degraded" when the database does not answer.
    """
    database_ok = await get_database().check_connection()
    return HealthResponse(status="healthy" if database_ok else "degraded")

