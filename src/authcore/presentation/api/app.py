"""FastAPI application factory.

Creates and configures the FastAPI application with the account router,
middleware, and exception handlers.

Run with:
    uvicorn --factory authcore.presentation.api.app:create_app
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine

from authcore.infrastructure.persistence.sqlalchemy import create_schema
from authcore.presentation.api.config import get_api_settings
from authcore.presentation.api.dependencies import get_engine
from authcore.presentation.api.exception_handlers import setup_exception_handlers
from authcore.presentation.api.routers import accounts_router
from authcore_config.settings import Settings

API_VERSION = "1.0.0"
ACCOUNTS_PREFIX = "/api/user"

OPENAPI_TAGS = [
    {
        "name": "Accounts",
        "description": """Account registration, login and maintenance.

**Security:**
- Passwords are hashed with Argon2i and a per-account salt
- JWT bearer tokens (HS256) valid for a fixed number of days
- Every credential change re-checks the current password
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for authcore modules and WARNING for noisy third-party libraries.
    """
    settings = get_api_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("authcore").setLevel(log_level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting authcore API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    logger.info("Shutting down authcore API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Create missing tables and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        await create_schema(engine)
    except (ConnectionRefusedError, OperationalError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_api_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Account registration, authentication and profile management.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(accounts_router, prefix=ACCOUNTS_PREFIX, tags=["Accounts"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    return app
