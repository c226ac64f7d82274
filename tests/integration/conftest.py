"""Integration fixtures: an in-memory SQLite database with foreign keys enforced.

Each test gets a freshly created schema; the engine is disposed afterwards.
"""

from collections.abc import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.pool import StaticPool

import wms_common.infrastructure.persistence  # noqa: F401 (registers all mappers)
from wms_common.infrastructure.database import Base, build_engine, build_session_factory
from wms_common.infrastructure.persistence.unit_of_work import UnitOfWork

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine(SQLITE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def unit_of_work(engine: AsyncEngine) -> Callable[[], UnitOfWork]:
    """Factory for units of work bound to the test database."""
    session_factory = build_session_factory(engine)
    return lambda: UnitOfWork(session_factory)
