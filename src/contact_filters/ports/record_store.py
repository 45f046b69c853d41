"""Port: record store that supplies filterable records."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .query_builder import QueryBuilderPort


@runtime_checkable
class RecordStorePort(Protocol):
    """Read interface for the record collection."""

    def query_builder(self) -> QueryBuilderPort: ...

    def execute(self, query: QueryBuilderPort) -> list[dict]: ...
