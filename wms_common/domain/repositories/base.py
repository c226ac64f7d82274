"""Generic repository base interface.

Repository[T, ID] is the root abstraction for all data-access interfaces in
this domain layer.  Concrete implementations live in
wms_common/infrastructure/persistence/ and are bound to one entity type each.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / aiosqlite).
  - T is the domain model type (never an ORM row); ID is its identifier type.
  - find_all() and find_by_unique_id() run named queries chosen by the
    concrete implementation; find_by_query() passes the name and parameters
    through to the query catalog untouched.
  - References are not pre-validated here.  Integrity failures come from the
    database and surface as wms_common.domain.exceptions errors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Abstract CRUD interface for a domain aggregate or entity."""

    entity_type: ClassVar[type[Any]]

    @abstractmethod
    async def find_by_id(self, id: ID) -> T | None:
        """Return the entity with the given identifier, or None if not found."""

    @abstractmethod
    async def find_all(self) -> list[T]:
        """Return every stored entity of the bound type."""

    @abstractmethod
    async def find_by_query(self, query_name: str, params: Mapping[str, Any] | None = None) -> list[T]:
        """Run a named query with named parameters."""

    @abstractmethod
    async def find_by_unique_id(self, key: Any) -> T | None:
        """Return the single entity matching a business key, or None.

        Raises IncorrectResultSizeError when more than one record matches.
        """

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert or update the entity and return the stored state."""

    @abstractmethod
    async def persist(self, entity: T) -> None:
        """Insert a new entity.  Raises if it exists or a reference cannot be resolved."""

    @abstractmethod
    async def remove(self, entity: T) -> None:
        """Delete the entity and everything it exclusively owns."""
