"""QueryTranslator: maps a FilterConfig onto a remote query builder."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .filter_engine import to_text
from .filters import FilterCondition, FilterConfig, FilterOp, LogicalOp

if TYPE_CHECKING:
    from ..ports.query_builder import QueryBuilderPort

# Ops whose remote predicate keeps at least every row the in-memory evaluator keeps.
# The LIKE ops rely on the builder matching against to_text of the field.
# equals is excluded (remote equality is case-sensitive), is_empty too (is null
# misses empty strings).
PUSHDOWN_SAFE_OPS = frozenset({
    FilterOp.is_not_empty,
    FilterOp.not_equals,
    FilterOp.contains,
    FilterOp.starts_with,
    FilterOp.ends_with,
})

_TRANSLATED_OPS = frozenset({
    FilterOp.is_empty,
    FilterOp.is_not_empty,
    FilterOp.equals,
    FilterOp.not_equals,
    FilterOp.contains,
    FilterOp.starts_with,
    FilterOp.ends_with,
})


def escape_like(value: str) -> str:
    """Escape \\, % and _ for a LIKE pattern using backslash as the escape char."""
    value = value.replace("\\", "\\\\")
    return value.replace("%", "\\%").replace("_", "\\_")


def like_pattern(value: Any, op: FilterOp) -> str:
    lit = escape_like(to_text(value))
    if op is FilterOp.contains:
        return f"%{lit}%"
    if op is FilterOp.starts_with:
        return f"{lit}%"
    if op is FilterOp.ends_with:
        return f"%{lit}"
    raise AssertionError("LIKE pattern requested for non-like operator")


class QueryTranslator:
    """Translate the first group of a FilterConfig into chained predicates.

    Only the first group is translated and its predicates are always joined
    with the builder's AND. The in-memory FilterEngine stays the source of
    truth; use ``can_push_down`` before relying on the remote result.
    """

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger

    def to_remote_query(
        self,
        builder: QueryBuilderPort,
        config: FilterConfig | Mapping[str, Any] | None,
    ) -> QueryBuilderPort:
        config = FilterConfig.coerce(config)
        query = builder.select_all()
        if not config.has_groups:
            return query

        if len(config.groups) > 1 and self._logger:
            self._logger.warning(
                "remote_translation_partial",
                extra={"groups": len(config.groups), "translated_groups": 1},
            )

        group = config.groups[0]
        if (
            group.effective_operator is LogicalOp.OR
            and len(group.conditions) > 1
            and self._logger
        ):
            self._logger.warning(
                "remote_translation_or_as_and",
                extra={"conditions": len(group.conditions)},
            )

        for condition in group.conditions:
            query = self._apply_condition(query, condition)
        return query

    def can_push_down(self, config: FilterConfig | Mapping[str, Any] | None) -> bool:
        """True when the translated query selects a superset of the in-memory result."""
        config = FilterConfig.coerce(config)
        if not config.has_groups:
            return True
        if len(config.groups) != 1:
            return False
        group = config.groups[0]
        if not group.conditions:
            return False
        if group.effective_operator is LogicalOp.OR and len(group.conditions) > 1:
            return False
        return all(
            c.field and c.op in PUSHDOWN_SAFE_OPS for c in group.conditions
        )

    def _apply_condition(
        self, query: QueryBuilderPort, condition: FilterCondition
    ) -> QueryBuilderPort:
        op = condition.op
        field = condition.field
        if not field or op not in _TRANSLATED_OPS:
            if self._logger:
                self._logger.warning(
                    "remote_predicate_skipped",
                    extra={"field": field, "operator": condition.operator},
                )
            return query

        if op is FilterOp.is_empty:
            return query.is_null(field)
        elif op is FilterOp.is_not_empty:
            return query.is_not_null(field)
        elif op is FilterOp.equals:
            return query.eq(field, condition.value)
        elif op is FilterOp.not_equals:
            return query.not_eq(field, condition.value)
        else:
            return query.ilike(field, like_pattern(condition.value, op))
