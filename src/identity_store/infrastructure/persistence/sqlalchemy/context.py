"""Persistence context: one session per unit of work."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from identity_store.exceptions import ContextClosedError
from identity_store.infrastructure.persistence.sqlalchemy.engine import (
    get_session_maker,
)

logger = logging.getLogger(__name__)


class IdentityDbContext:
    """
    Owns one ``AsyncSession`` for the lifetime of a unit of work.

    Build one context per concurrent unit of work and pass it to the stores;
    repositories share the context's session and commit through it after
    every mutation. No transaction spans more than one repository call, and a
    failed commit is rolled back so the session stays usable.
    """

    def __init__(self, session: AsyncSession):
        self._session: AsyncSession | None = session

    @classmethod
    def open(
        cls,
        session_maker: async_sessionmaker[AsyncSession] | None = None,
    ) -> IdentityDbContext:
        """Open a context on a fresh session from the given (or shared) maker."""
        maker = session_maker or get_session_maker()
        return cls(maker())

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise ContextClosedError
        return self._session

    @property
    def is_closed(self) -> bool:
        return self._session is None

    async def commit(self) -> None:
        """Commit pending changes; on a storage error roll back and re-raise."""
        session = self.session
        try:
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            raise

    async def rollback(self) -> None:
        """Discard the current transaction so the session can be reused."""
        await self.session.rollback()
        logger.debug("Persistence context rolled back")

    async def close(self) -> None:
        """Release the session. Safe to call more than once."""
        if self._session is None:
            return
        session, self._session = self._session, None
        await session.close()
        logger.debug("Persistence context closed")

    async def __aenter__(self) -> IdentityDbContext:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
