"""FilterService: record search orchestration.

Public methods: ``search(config)`` against the record store and
``preview(records, config)`` over caller-supplied records. The in-memory
FilterEngine decides the final result in both paths; the remote query is
only a prefilter.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..config.runtime import FilterSettings
from ..domain.description import describe_filter
from ..domain.filter_engine import FilterEngine
from ..domain.filters import FilterConfig, Record
from ..domain.query_translator import QueryTranslator
from ..errors import InvalidFilterError
from ..interface.validation import validate_filter
from ..models.responses import FilterResult
from ..ports.record_store import RecordStorePort


class FilterService:
    """Validates, fetches and evaluates advanced filters."""

    def __init__(
        self,
        record_store: RecordStorePort,
        engine: FilterEngine | None = None,
        translator: QueryTranslator | None = None,
        settings: FilterSettings | None = None,
        logger: Any = None,
    ) -> None:
        self._store = record_store
        self._engine = engine or FilterEngine(logger=logger)
        self._translator = translator or QueryTranslator(logger=logger)
        self._pushdown = settings.remote_pushdown if settings is not None else True
        self._logger = logger

    def _checked(self, config: FilterConfig | Mapping[str, Any] | None) -> FilterConfig:
        config = FilterConfig.coerce(config)
        result = validate_filter(config)
        if not result.is_valid:
            if self._logger:
                self._logger.info("filter_rejected", extra={"errors": result.errors})
            raise InvalidFilterError(result.errors)
        return config

    def search(self, config: FilterConfig | Mapping[str, Any] | None) -> FilterResult:
        config = self._checked(config)

        # 1. Choose remote prefilter or full fetch
        if self._pushdown and self._translator.can_push_down(config):
            query = self._translator.to_remote_query(self._store.query_builder(), config)
            strategy = "remote"
        else:
            query = self._store.query_builder().select_all()
            strategy = "client"

        # 2. Fetch
        rows = self._store.execute(query)

        # 3. Evaluate in memory
        kept = self._engine.apply(rows, config)

        if self._logger:
            self._logger.info(
                "filter_search_done",
                extra={"strategy": strategy, "fetched": len(rows), "kept": len(kept)},
            )
        return FilterResult(
            records=[dict(r) for r in kept],
            count=len(kept),
            description=describe_filter(config),
            strategy=strategy,
        )

    def preview(
        self,
        records: Sequence[Record],
        config: FilterConfig | Mapping[str, Any] | None,
    ) -> FilterResult:
        config = self._checked(config)
        kept = self._engine.apply(records, config)
        return FilterResult(
            records=[dict(r) for r in kept],
            count=len(kept),
            description=describe_filter(config),
            strategy="memory",
        )
