"""Account aggregate and its credential.

Both are frozen: an operation loads an account, computes a new value with
``dataclasses.replace`` and hands that value back to the repository.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from uuid import UUID, uuid4

from authcore.domain.shared.time import utc_now


@dataclass(frozen=True)
class Credential:
    """Per-account salt and the Argon2 digest of the current password.

    Salt and hash are always replaced together.
    """

    salt: str
    password_hash: str

    def __repr__(self) -> str:
        return "Credential(salt=***, password_hash=***)"


@dataclass(frozen=True)
class AccountProfile:
    """Public projection of an account. Never carries secret material."""

    id: UUID
    email: str
    username: str
    first_name: str
    last_name: str
    avatar: str | None
    date_registered: datetime
    last_seen: datetime


@dataclass(frozen=True)
class AccountChanges:
    """Optional updates to an account; ``None`` leaves a field untouched."""

    email: str | None = None
    username: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None


@dataclass(frozen=True)
class Account:
    """Account aggregate root: identity, display fields and credential."""

    email: str
    username: str
    first_name: str
    last_name: str
    credential: Credential
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    date_registered: datetime = field(default_factory=utc_now)
    last_seen: datetime = field(default_factory=utc_now)

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        email: str,
        username: str,
        first_name: str,
        last_name: str,
        credential: Credential,
    ) -> Account:
        now = utc_now()
        return cls(
            email=email,
            username=username,
            first_name=first_name,
            last_name=last_name,
            credential=credential,
            date_registered=now,
            last_seen=now,
        )

    @property
    def email_key(self) -> str:
        """Case-folded email used for uniqueness and lookup."""
        return normalize_email(self.email)

    def seen_now(self) -> Account:
        return replace(self, last_seen=utc_now())

    def with_password_hash(self, password_hash: str) -> Account:
        return replace(
            self,
            credential=Credential(
                salt=self.credential.salt,
                password_hash=password_hash,
            ),
        )

    def with_changes(self, changes: AccountChanges) -> Account:
        """Apply the non-secret fields of ``changes``.

        The password is handled separately through ``with_password_hash``.
        """
        return replace(
            self,
            email=changes.email if changes.email is not None else self.email,
            username=(
                changes.username if changes.username is not None else self.username
            ),
            first_name=(
                changes.first_name
                if changes.first_name is not None
                else self.first_name
            ),
            last_name=(
                changes.last_name if changes.last_name is not None else self.last_name
            ),
            avatar=changes.avatar if changes.avatar is not None else self.avatar,
        )

    def to_profile(self) -> AccountProfile:
        return AccountProfile(
            id=self.id,
            email=self.email,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            avatar=self.avatar,
            date_registered=self.date_registered,
            last_seen=self.last_seen,
        )

    def __repr__(self) -> str:
        return f"Account(id={self.id}, username={self.username!r})"


def normalize_email(email: str) -> str:
    return email.strip().lower()
