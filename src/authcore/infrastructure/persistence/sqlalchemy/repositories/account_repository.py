"""SQLAlchemy implementation of AccountRepository."""

import logging
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.domain.account import (
    Account,
    AccountRepository,
    Credential,
    normalize_email,
)
from authcore.domain.shared.time import ensure_tz_aware
from authcore.exceptions import (
    AccountNotFoundError,
    DuplicateEmailError,
    DuplicateUsernameError,
)
from authcore.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
    CredentialModel,
)
from authcore.infrastructure.persistence.sqlalchemy.session import store_errors

logger = logging.getLogger(__name__)


class AccountRepositorySQLAlchemy(AccountRepository):
    """SQLAlchemy implementation of the AccountRepository interface.

    Writes are flushed but never committed; the session owner decides the
    transaction boundary. Unique constraints on ``email_key`` and
    ``username`` are the final word on duplicates.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        model = await self._find_model_by_id(account_id)
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Account | None:
        stmt = select(AccountModel).where(
            AccountModel.email_key == normalize_email(email),
        )
        with store_errors():
            result = await self._session.execute(stmt)
        model = result.unique().scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_username(self, username: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.username == username)
        with store_errors():
            result = await self._session.execute(stmt)
        model = result.unique().scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(
            exists().where(AccountModel.email_key == normalize_email(email)),
        )
        with store_errors():
            result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def exists_by_username(self, username: str) -> bool:
        stmt = select(exists().where(AccountModel.username == username))
        with store_errors():
            result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def insert(self, account: Account) -> None:
        self._session.add(self._map_to_model(account))
        await self._flush(account)
        logger.info("Created account: %s (username: %s)", account.id, account.username)

    async def update(self, account: Account) -> None:
        model = await self._find_model_by_id(account.id)
        if model is None:
            raise AccountNotFoundError(account.id)

        self._update_model(model, account)
        await self._flush(account)
        logger.debug("Updated account: %s", account.id)

    async def delete(self, account: Account) -> None:
        model = await self._find_model_by_id(account.id)
        if model is None:
            raise AccountNotFoundError(account.id)

        await self._session.delete(model)
        with store_errors():
            await self._session.flush()
        logger.info("Deleted account: %s", account.id)

    async def _find_model_by_id(self, account_id: UUID) -> AccountModel | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        with store_errors():
            result = await self._session.execute(stmt)
        return result.unique().scalar_one_or_none()

    async def _flush(self, account: Account) -> None:
        try:
            with store_errors():
                await self._session.flush()
        except IntegrityError as e:
            message = str(e.orig).lower()
            if "email_key" in message:
                raise DuplicateEmailError(account.email) from e
            if "username" in message:
                raise DuplicateUsernameError(account.username) from e
            raise

    def _map_to_domain(self, model: AccountModel) -> Account:
        return Account(
            id=model.id,
            email=model.email,
            username=model.username,
            first_name=model.first_name,
            last_name=model.last_name,
            avatar=model.avatar,
            credential=Credential(
                salt=model.credential.salt,
                password_hash=model.credential.password_hash,
            ),
            date_registered=ensure_tz_aware(model.date_registered),
            last_seen=ensure_tz_aware(model.last_seen),
        )

    def _map_to_model(self, account: Account) -> AccountModel:
        return AccountModel(
            id=account.id,
            email=account.email,
            email_key=account.email_key,
            username=account.username,
            first_name=account.first_name,
            last_name=account.last_name,
            avatar=account.avatar,
            date_registered=account.date_registered,
            last_seen=account.last_seen,
            credential=CredentialModel(
                account_id=account.id,
                salt=account.credential.salt,
                password_hash=account.credential.password_hash,
            ),
        )

    def _update_model(self, model: AccountModel, account: Account) -> None:
        model.email = account.email
        model.email_key = account.email_key
        model.username = account.username
        model.first_name = account.first_name
        model.last_name = account.last_name
        model.avatar = account.avatar
        model.last_seen = account.last_seen
        model.credential.salt = account.credential.salt
        model.credential.password_hash = account.credential.password_hash
