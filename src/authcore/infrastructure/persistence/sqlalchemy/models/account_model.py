"""SQLAlchemy model for the Account aggregate."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from authcore.domain.shared.time import utc_now
from authcore.infrastructure.persistence.sqlalchemy.base import Base

if TYPE_CHECKING:
    from authcore.infrastructure.persistence.sqlalchemy.models.credential_model import (  # noqa: E501
        CredentialModel,
    )


class AccountModel(Base):
    """SQLAlchemy model for persisting Account aggregates.

    ``email`` keeps the address as registered; ``email_key`` holds its
    lowercased form and carries the uniqueness constraint.
    """

    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("email_key", name="uq_accounts_email_key"),
        UniqueConstraint("username", name="uq_accounts_username"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    email_key: Mapped[str] = mapped_column(String(254), nullable=False, index=True)
    username: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(150), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(150), nullable=False, default="")
    avatar: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    date_registered: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    last_seen: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    credential: Mapped[CredentialModel] = relationship(
        back_populates="account",
        uselist=False,
        lazy="joined",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, username={self.username})>"
