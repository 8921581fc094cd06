"""Authentication service for account registration, login and maintenance."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from authcore.domain.account import Account, AccountChanges, AccountProfile, Credential
from authcore.exceptions import (
    AccountNotFoundError,
    DuplicateEmailError,
    DuplicateUsernameError,
    ForbiddenError,
    InvalidEmailFormatError,
    NotRegisteredError,
    UnauthorizedError,
    WeakPasswordError,
    WrongCredentialsError,
)

if TYPE_CHECKING:
    from uuid import UUID

    from authcore.domain.account import AccountRepository
    from authcore.schemas import AccessToken
    from authcore.services import (
        CredentialValidator,
        JWTService,
        PasswordHashingService,
        SaltGenerator,
    )

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for account authentication.

    Orchestrates the repository, salt generation, password hashing, policy
    checks and token issuance to provide:
    - Registration
    - Login by email or username
    - Credential and profile updates
    - Account deletion
    - Authentication checks and profile reads

    The service holds no per-request state. Every operation loads the
    account, computes a new immutable value and hands it back to the
    repository. Committing is left to the caller owning the session.
    """

    def __init__(  # noqa: PLR0913
        self,
        account_repository: AccountRepository,
        password_service: PasswordHashingService,
        salt_generator: SaltGenerator,
        validator: CredentialValidator,
        jwt_service: JWTService,
    ):
        self._account_repo = account_repository
        self._password_service = password_service
        self._salt_generator = salt_generator
        self._validator = validator
        self._jwt_service = jwt_service

    async def _hash(self, password: str, salt: str) -> str:
        # Argon2 blocks for tens of milliseconds; run it in a worker thread
        return await asyncio.to_thread(self._password_service.hash, password, salt)

    async def _verify(self, password: str, credential: Credential) -> bool:
        return await asyncio.to_thread(
            self._password_service.verify,
            password,
            credential.salt,
            credential.password_hash,
        )

    async def register(  # noqa: PLR0913
        self,
        email: str,
        username: str,
        first_name: str,
        last_name: str,
        password: str,
    ) -> AccountProfile:
        """Create a new account.

        Raises
        ------
        DuplicateEmailError
            If the email (case-insensitive) is already taken
        DuplicateUsernameError
            If the username is already taken
        InvalidEmailFormatError
            If the email is not syntactically valid
        WeakPasswordError
            If the password is shorter than the policy minimum
        """
        if await self._account_repo.exists_by_email(email):
            raise DuplicateEmailError(email)
        if await self._account_repo.exists_by_username(username):
            raise DuplicateUsernameError(username)
        if not self._validator.is_email_well_formed(email):
            raise InvalidEmailFormatError(email)
        if not self._validator.is_password_strong_enough(password):
            raise WeakPasswordError

        salt = self._salt_generator.generate()
        password_hash = await self._hash(password, salt)
        account = Account.create(
            email=email,
            username=username,
            first_name=first_name,
            last_name=last_name,
            credential=Credential(salt=salt, password_hash=password_hash),
        )
        await self._account_repo.insert(account)

        logger.info("Account registered: %s (%s)", account.id, username)
        return account.to_profile()

    async def login(self, email_or_username: str, password: str) -> AccessToken:
        """Authenticate by email or username and issue an access token.

        Raises
        ------
        NotRegisteredError
            If no account matches the identifier
        WrongCredentialsError
            If the password does not match
        """
        if self._validator.is_email_well_formed(email_or_username):
            account = await self._account_repo.find_by_email(email_or_username)
        else:
            account = await self._account_repo.find_by_username(email_or_username)

        if account is None:
            raise NotRegisteredError(email_or_username)

        if not await self._verify(password, account.credential):
            logger.warning("Failed login for account: %s", account.id)
            raise WrongCredentialsError

        account = account.seen_now()
        await self._account_repo.update(account)

        logger.info("Account logged in: %s", account.id)
        return self._jwt_service.issue(account.id)

    async def update_credentials(
        self,
        account_id: UUID,
        current_password: str,
        changes: AccountChanges,
    ) -> AccountProfile:
        """Apply ``changes`` after re-checking the current password.

        The current password is required for every change, display fields
        included. A new password is hashed with the account's existing salt.

        Raises
        ------
        UnauthorizedError
            If the account no longer exists
        WrongCredentialsError
            If ``current_password`` does not match
        DuplicateEmailError, InvalidEmailFormatError
            If the new email is taken by another account or malformed
        DuplicateUsernameError
            If the new username is taken by another account
        WeakPasswordError
            If the new password is too short
        """
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            raise UnauthorizedError

        if not await self._verify(current_password, account.credential):
            logger.warning("Rejected update for account: %s", account_id)
            raise WrongCredentialsError

        if changes.email is not None:
            owner = await self._account_repo.find_by_email(changes.email)
            if owner is not None and owner.id != account.id:
                raise DuplicateEmailError(changes.email)

        if changes.username is not None:
            owner = await self._account_repo.find_by_username(changes.username)
            if owner is not None and owner.id != account.id:
                raise DuplicateUsernameError(changes.username)

        # Duplicates before format and strength, as in register
        if changes.email is not None:
            if not self._validator.is_email_well_formed(changes.email):
                raise InvalidEmailFormatError(changes.email)

        if changes.password is not None:
            if not self._validator.is_password_strong_enough(changes.password):
                raise WeakPasswordError

        updated = account.with_changes(changes)
        if changes.password is not None:
            password_hash = await self._hash(changes.password, account.credential.salt)
            updated = updated.with_password_hash(password_hash)

        await self._account_repo.update(updated)

        logger.info("Account updated: %s", account_id)
        return updated.to_profile()

    async def delete_account(self, account_id: UUID, password: str) -> None:
        """Delete an account and its credential.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist
        ForbiddenError
            If the password does not match
        """
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)

        if not await self._verify(password, account.credential):
            logger.warning("Rejected deletion for account: %s", account_id)
            raise ForbiddenError

        await self._account_repo.delete(account)
        logger.info("Account deleted: %s", account_id)

    async def check_auth(self, account_id: UUID) -> AccountProfile:
        """Confirm an authenticated identity still resolves and mark it seen.

        Raises
        ------
        UnauthorizedError
            If the account no longer exists
        """
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            raise UnauthorizedError

        account = account.seen_now()
        await self._account_repo.update(account)
        return account.to_profile()

    async def get_profile(self, account_id: UUID) -> AccountProfile:
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account.to_profile()
