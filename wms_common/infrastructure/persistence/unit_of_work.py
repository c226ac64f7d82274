"""Unit of work: one AsyncSession and one transaction per `async with` block.

    async with UnitOfWork() as uow:
        await uow.repositories.transport_unit_types.persist(tut)

Leaving the block commits; an exception escaping it rolls back instead.
The session is closed on every exit path.
"""

from __future__ import annotations

import logging
from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from wms_common.infrastructure.database import AsyncSessionLocal
from wms_common.infrastructure.persistence.errors import translate_errors
from wms_common.infrastructure.persistence.repositories import Repositories, get_repositories

logger = logging.getLogger(__name__)


class UnitOfWork:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None) -> None:
        self._session_factory = session_factory or AsyncSessionLocal
        self._session: AsyncSession | None = None
        self._repositories: Repositories | None = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active; use it as 'async with UnitOfWork()'")
        return self._session

    @property
    def repositories(self) -> Repositories:
        if self._repositories is None:
            raise RuntimeError("UnitOfWork is not active; use it as 'async with UnitOfWork()'")
        return self._repositories

    async def __aenter__(self) -> UnitOfWork:
        self._session = self._session_factory()
        self._repositories = get_repositories(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is None:
                await self.commit()
            else:
                logger.debug("Rolling back unit of work after %s", exc_type.__name__)
                await self.rollback()
        finally:
            await self.session.close()
            self._session = None
            self._repositories = None

    async def commit(self) -> None:
        with translate_errors(operation="commit"):
            await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
