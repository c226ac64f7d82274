"""Backend-agnostic persistence errors.

Repository implementations translate driver and ORM exceptions into these
types so callers never handle SQLAlchemy errors directly.  "Not found" is
never an exception: lookups return None or an empty list.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for repository failures; also used for generic backend failures."""

    def __init__(
        self,
        message: str,
        *,
        entity_name: str | None = None,
        operation: str | None = None,
    ) -> None:
        self.entity_name = entity_name
        self.operation = operation
        if entity_name and operation:
            message = f"[{entity_name}] {operation} failed: {message}"
        super().__init__(message)


class IntegrityViolationError(RepositoryError):
    """A mandatory reference is unset, a referenced record is missing, or a unique key clashes."""


class DuplicateEntityError(IntegrityViolationError):
    """An insert targets an identity that is already stored."""


class IncorrectResultSizeError(RepositoryError):
    """A query expected to match at most one record matched more."""

    def __init__(
        self,
        expected_size: int,
        actual_size: int,
        *,
        entity_name: str | None = None,
        operation: str | None = None,
    ) -> None:
        self.expected_size = expected_size
        self.actual_size = actual_size
        super().__init__(
            f"Unexpected size of result list: expected {expected_size}, got {actual_size}",
            entity_name=entity_name,
            operation=operation,
        )


class QueryError(RepositoryError):
    """Unknown named query, or parameters the query does not accept."""


class UnknownEntityTypeError(KeyError):
    """No repository is bound to the requested entity type."""
