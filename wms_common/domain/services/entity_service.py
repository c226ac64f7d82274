"""Generic entity service: look up entities by their domain type.

The service holds one repository per entity type and dispatches on the type
the caller asks for, so callers that only know a domain class (admin
listings, exports) need not know which repository serves it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from wms_common.domain.exceptions import UnknownEntityTypeError
from wms_common.domain.repositories.base import Repository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityService:
    def __init__(self, repositories: Iterable[Repository[Any, Any]]) -> None:
        self._by_type: dict[type, Repository[Any, Any]] = {}
        for repo in repositories:
            if repo.entity_type in self._by_type:
                raise ValueError(f"Two repositories bound to {repo.entity_type.__name__}")
            self._by_type[repo.entity_type] = repo

    def repository_for(self, entity_type: type[T]) -> Repository[T, Any]:
        try:
            return self._by_type[entity_type]
        except KeyError:
            raise UnknownEntityTypeError(entity_type.__name__) from None

    async def find_all(self, entity_type: type[T]) -> list[T]:
        """Return every stored entity of entity_type."""
        logger.debug("find_all(%s)", entity_type.__name__)
        return await self.repository_for(entity_type).find_all()
