"""Session helpers shared by the repositories and the request layer."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors() -> Iterator[None]:
    """Translate driver connectivity failures into ``StoreUnavailableError``."""
    try:
        yield
    except OperationalError as e:
        logger.error("Account store unavailable: %s", e)
        raise StoreUnavailableError from e


async def commit(session: AsyncSession) -> None:
    """Commit ``session``, reporting a lost or locked store as transient."""
    with store_errors():
        await session.commit()
