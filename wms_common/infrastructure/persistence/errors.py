"""Translation of SQLAlchemy exceptions into domain repository errors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import FlushError

from wms_common.domain.exceptions import (
    DuplicateEntityError,
    IntegrityViolationError,
    RepositoryError,
)

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors(entity_name: str | None = None, operation: str | None = None) -> Iterator[None]:
    """Re-raise SQLAlchemy failures raised inside the block as RepositoryError subclasses.

    IntegrityError -> IntegrityViolationError, FlushError (identity clash in
    the session) -> DuplicateEntityError, any other SQLAlchemyError ->
    RepositoryError.  The original exception is kept as __cause__.
    """
    try:
        yield
    except IntegrityError as exc:
        logger.warning("Integrity violation during %s of %s: %s", operation, entity_name, exc.orig)
        raise IntegrityViolationError(
            str(exc.orig), entity_name=entity_name, operation=operation
        ) from exc
    except FlushError as exc:
        logger.warning("Duplicate identity during %s of %s: %s", operation, entity_name, exc)
        raise DuplicateEntityError(str(exc), entity_name=entity_name, operation=operation) from exc
    except SQLAlchemyError as exc:
        logger.warning("Backend failure during %s of %s: %s", operation, entity_name, exc)
        raise RepositoryError(str(exc), entity_name=entity_name, operation=operation) from exc
