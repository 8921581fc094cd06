"""FastAPI dependency injection for the authcore API.

Provides dependencies for:
- Database engine and sessions
- Service instances
- Authentication (current account id from JWT)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from authcore.application.services import AuthenticationService
from authcore.exceptions import InvalidTokenError, UnauthorizedError
from authcore.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
)
from authcore.presentation.api.config import get_api_settings
from authcore.services import (
    CredentialValidator,
    JWTService,
    PasswordHashingService,
    SaltGenerator,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_api_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def clear_dependency_caches() -> None:
    """Forget cached settings, engine and services (used by tests)."""
    get_api_settings.cache_clear()
    get_database_url.cache_clear()
    get_engine.cache_clear()
    get_session_maker.cache_clear()
    get_jwt_service.cache_clear()
    get_password_service.cache_clear()


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_jwt_service() -> JWTService:
    """Get JWT service configured from settings."""
    return JWTService(get_api_settings().token_config())


@lru_cache(maxsize=1)
def get_password_service() -> PasswordHashingService:
    """Get password hashing service with the configured Argon2 cost."""
    return PasswordHashingService(get_api_settings().hash_parameters())


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service bound to the request's session."""
    return AuthenticationService(
        account_repository=AccountRepositorySQLAlchemy(session),
        password_service=password_service,
        salt_generator=SaltGenerator(),
        validator=CredentialValidator(),
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current Account (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_account_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UUID:
    """
    Resolve the authenticated account id from the bearer token.

    Only the signature and expiry are checked here; whether the account
    still exists is up to the operation.

    Raises
    ------
    UnauthorizedError
        If no bearer token was sent
    InvalidTokenError
        If the token is invalid or expired
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        payload = jwt_service.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise

    return payload.account_id


# Type alias for injected current account id
CurrentAccountId = Annotated[UUID, Depends(get_current_account_id)]
