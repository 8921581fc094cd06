# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for account persistence."""

from authcore.infrastructure.persistence.sqlalchemy.models.account_model import (
    AccountModel,
)
from authcore.infrastructure.persistence.sqlalchemy.models.credential_model import (
    CredentialModel,
)

__all__ = [
    "AccountModel",
    "CredentialModel",
]
