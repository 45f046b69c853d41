"""Port: chainable remote query builder."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.filters import Scalar


@runtime_checkable
class QueryBuilderPort(Protocol):
    """Each method returns a new handle with one more predicate applied.

    Predicates chained on one handle are combined with AND by the store.
    """

    def select_all(self) -> QueryBuilderPort: ...

    def is_null(self, field: str) -> QueryBuilderPort: ...

    def is_not_null(self, field: str) -> QueryBuilderPort: ...

    def eq(self, field: str, value: Scalar) -> QueryBuilderPort: ...

    def not_eq(self, field: str, value: Scalar) -> QueryBuilderPort: ...

    def ilike(self, field: str, pattern: str) -> QueryBuilderPort:
        """Case-insensitive LIKE over the field rendered the way the engine renders it."""
        ...
