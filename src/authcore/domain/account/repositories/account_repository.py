"""Account repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from authcore.domain.account.aggregates.account import Account


class AccountRepository(ABC):
    """Repository interface for Account aggregates.

    Implementations must enforce unique email (case-insensitive) and unique
    username themselves; the existence checks here are advisory only.

    Write methods raise ``DuplicateEmailError`` / ``DuplicateUsernameError``
    on a uniqueness violation, ``AccountNotFoundError`` when the target
    does not exist, and ``StoreUnavailableError`` when the store cannot be
    reached.
    """

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find an account by its ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Account | None:
        """Find an account by email address (case-insensitive)."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Account | None:
        """Find an account by username."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if an account exists with the given email."""

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check if an account exists with the given username."""

    @abstractmethod
    async def insert(self, account: Account) -> None:
        """Persist a new account together with its credential."""

    @abstractmethod
    async def update(self, account: Account) -> None:
        """Replace the stored state of an existing account."""

    @abstractmethod
    async def delete(self, account: Account) -> None:
        """Remove an account and its credential as a unit."""
