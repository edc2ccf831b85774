"""
Pastoral Admin Backend — Repository Base
==========================================

What:  Shared plumbing for every repository: the injected session factory,
       the transaction entry point and the "own or borrowed session" scope.
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pastoral_admin.database import unit_of_work


class BaseRepository:
    """Holds the session factory; owns no other state."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def transaction(self) -> AsyncContextManager[AsyncSession]:
        """
        Open a unit of work that several repository calls can share.

        Usage:
            async with church_repo.transaction() as session:
                await address_repo.create(address, session=session)
                await church_repo.create(church, session=session)
        """
        return unit_of_work(self._session_factory)

    @asynccontextmanager
    async def _scope(self, session: Optional[AsyncSession] = None) -> AsyncIterator[AsyncSession]:
        # A borrowed session is committed or rolled back by its owner
        if session is not None:
            yield session
            return
        async with unit_of_work(self._session_factory) as own:
            yield own
