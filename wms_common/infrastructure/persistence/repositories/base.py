"""Generic SQLAlchemy implementation of Repository[T, ID].

A concrete repository binds one domain type to one ORM model and names the
two catalog queries it relies on:

    class SqlLocationRepository(SqlRepository[Location, OrmLocation, UUID], LocationRepository):
        entity_type = Location
        model = OrmLocation
        find_all_query = "Location.findAll"
        find_by_unique_id_query = "Location.findByLocationPK"

and supplies the row <-> domain mapping.  Everything else (lookups, upsert,
insert, delete, error translation) is shared.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from wms_common.domain.exceptions import IncorrectResultSizeError, RepositoryError
from wms_common.domain.repositories.base import Repository
from wms_common.infrastructure.persistence.errors import translate_errors
from wms_common.infrastructure.persistence.queries import QueryCatalog, named_queries

logger = logging.getLogger(__name__)

T = TypeVar("T")
O = TypeVar("O")  # noqa: E741
ID = TypeVar("ID")

BeforeUpdate = Callable[[Any], Any]


class SqlRepository(Repository[T, ID], Generic[T, O, ID]):
    """Shared CRUD over an AsyncSession for one entity type.

    before_update runs before every save() and persist().  It may raise to
    reject the entity or return a replacement to be written instead; a None
    return keeps the entity unchanged.
    """

    model: ClassVar[type[Any]]
    find_all_query: ClassVar[str]
    find_by_unique_id_query: ClassVar[str]

    def __init__(
        self,
        session: AsyncSession,
        before_update: BeforeUpdate | None = None,
        queries: QueryCatalog = named_queries,
    ) -> None:
        self._session = session
        self._before_update = before_update
        self._queries = queries

    # --- mapping, supplied by concrete repositories ---

    @abstractmethod
    def _to_domain(self, row: O) -> T: ...

    @abstractmethod
    def _to_orm(self, entity: T) -> O: ...

    @abstractmethod
    def _identity(self, entity: T) -> ID: ...

    @abstractmethod
    def _unique_id_params(self, key: Any) -> dict[str, Any]: ...

    def _load_options(self) -> Sequence[Any]:
        """Loader options needed by _to_domain; none for flat entities."""
        return ()

    @property
    def _entity_name(self) -> str:
        return self.entity_type.__name__

    # --- reads ---

    async def find_by_id(self, id: ID) -> T | None:
        logger.debug("find_by_id(%s) on %s", id, self._entity_name)
        pk = inspect(self.model).primary_key[0]
        stmt = (
            select(self.model)
            .options(*self._load_options())
            .where(pk == id)
            .execution_options(populate_existing=True)
        )
        with translate_errors(self._entity_name, "find_by_id"):
            result = await self._session.execute(stmt)
            row = result.scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    async def find_all(self) -> list[T]:
        logger.debug("find_all() on %s using %s", self._entity_name, self.find_all_query)
        return await self.find_by_query(self.find_all_query)

    async def find_by_query(self, query_name: str, params: Mapping[str, Any] | None = None) -> list[T]:
        logger.debug("find_by_query(%s, %s) on %s", query_name, params, self._entity_name)
        return [self._to_domain(row) for row in await self._fetch(query_name, params)]

    async def find_by_unique_id(self, key: Any) -> T | None:
        logger.debug("find_by_unique_id(%s) on %s", key, self._entity_name)
        rows = await self._fetch(self.find_by_unique_id_query, self._unique_id_params(key))
        if len(rows) > 1:
            raise IncorrectResultSizeError(
                1, len(rows), entity_name=self._entity_name, operation="find_by_unique_id"
            )
        return self._to_domain(rows[0]) if rows else None

    async def _fetch(self, query_name: str, params: Mapping[str, Any] | None) -> list[O]:
        stmt = self._queries.build(query_name, params).execution_options(populate_existing=True)
        with translate_errors(self._entity_name, query_name):
            result = await self._session.execute(stmt)
            return list(result.scalars().all())

    # --- writes ---

    def _prepare(self, entity: T) -> T:
        if self._before_update is None:
            return entity
        replacement = self._before_update(entity)
        return entity if replacement is None else replacement

    async def save(self, entity: T) -> T:
        logger.debug("save(%s) on %s", self._identity(entity), self._entity_name)
        entity = self._prepare(entity)
        with translate_errors(self._entity_name, "save"):
            await self._session.merge(self._to_orm(entity))
            await self._session.flush()
        stored = await self.find_by_id(self._identity(entity))
        if stored is None:
            raise RepositoryError(
                "row vanished after merge", entity_name=self._entity_name, operation="save"
            )
        return stored

    async def persist(self, entity: T) -> None:
        logger.debug("persist(%s) on %s", self._identity(entity), self._entity_name)
        entity = self._prepare(entity)
        with translate_errors(self._entity_name, "persist"):
            self._session.add(self._to_orm(entity))
            await self._session.flush()

    async def remove(self, entity: T) -> None:
        identity = self._identity(entity)
        logger.debug("remove(%s) on %s", identity, self._entity_name)
        with translate_errors(self._entity_name, "remove"):
            row = await self._session.get(self.model, identity)
            if row is None:
                logger.debug("%s %s is not stored; nothing to remove", self._entity_name, identity)
                return
            await self._session.delete(row)
            await self._session.flush()
