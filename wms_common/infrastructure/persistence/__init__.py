"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports the repository implementations, the named-query catalog and
the unit of work.
"""

from wms_common.infrastructure.persistence.models import *  # noqa: F401, F403
from wms_common.infrastructure.persistence.models import __all__ as _orm_all
from wms_common.infrastructure.persistence.queries import QueryCatalog, named_queries
from wms_common.infrastructure.persistence.repositories import (
    Repositories,
    SqlLocationRepository,
    SqlRepository,
    SqlTransportUnitRepository,
    SqlTransportUnitTypeRepository,
    get_repositories,
)
from wms_common.infrastructure.persistence.unit_of_work import UnitOfWork

__all__ = _orm_all + [
    "QueryCatalog",
    "named_queries",
    "Repositories",
    "SqlRepository",
    "SqlTransportUnitTypeRepository",
    "SqlLocationRepository",
    "SqlTransportUnitRepository",
    "get_repositories",
    "UnitOfWork",
]
