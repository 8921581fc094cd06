"""SQLAlchemy model for account credentials."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from authcore.domain.shared.time import utc_now
from authcore.infrastructure.persistence.sqlalchemy.base import Base

if TYPE_CHECKING:
    from authcore.infrastructure.persistence.sqlalchemy.models.account_model import (
        AccountModel,
    )


class CredentialModel(Base):
    """Salt and password hash, owned 1:1 by an account."""

    __tablename__ = "account_credentials"

    account_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    salt: Mapped[str] = mapped_column(String(64), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )

    account: Mapped[AccountModel] = relationship(back_populates="credential")

    def __repr__(self) -> str:
        return f"<CredentialModel(account_id={self.account_id})>"
