"""Main FastAPI application entry point.

Wires the resource API, system endpoints, middleware and global
exception handlers. Tables are created at startup and demo accounts are
seeded when SEED_DEMO_USERS is set.

Run:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import (
    get_database,
    get_enforcer,
    get_logger,
    get_password_service,
)
from src.core.init_db import init_database
from src.presentation.routers import api_router, system_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan.

    - Startup: load the role matrix, create tables, seed demo accounts
    - Shutdown: dispose of the database engine
    """
    logger = get_logger()
    get_enforcer()

    database = get_database()
    await init_database(
        database,
        get_password_service(),
        logger,
        seed=settings.seed_demo_users,
    )
    logger.info(
        "application_started",
        environment=settings.environment.value,
        api_prefix=settings.api_prefix,
    )

    yield

    await database.close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    application = FastAPI(
        title=settings.app_name,
        description="Kennel management API: customers, dogs, kennels and bookings",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Trace-Id"],
    )
    application.add_middleware(TraceMiddleware)

    register_exception_handlers(application)

    application.include_router(api_router)
    application.include_router(system_router, prefix=settings.api_prefix)

    return application


app = create_app()
