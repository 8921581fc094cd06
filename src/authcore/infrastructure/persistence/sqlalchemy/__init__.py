"""SQLAlchemy implementation for authcore persistence.

Provides:
- Base: Declarative base for all models
- AccountModel / CredentialModel: the accounts and account_credentials tables
- AccountRepositorySQLAlchemy: Repository implementation for accounts
- create_schema: Create all tables on an engine
- commit: Commit a session, reporting store outages as StoreUnavailableError
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from authcore.infrastructure.persistence.sqlalchemy.base import Base
from authcore.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
    CredentialModel,
)
from authcore.infrastructure.persistence.sqlalchemy.repositories import (
    AccountRepositorySQLAlchemy,
)
from authcore.infrastructure.persistence.sqlalchemy.session import commit


async def create_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = [
    "AccountModel",
    "AccountRepositorySQLAlchemy",
    "Base",
    "CredentialModel",
    "commit",
    "create_schema",
]
