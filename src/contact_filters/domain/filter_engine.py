"""FilterEngine: evaluates a FilterConfig against in-memory records."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from .filters import (
    VALUELESS_OPS,
    FilterCondition,
    FilterConfig,
    FilterGroup,
    FilterOp,
    LogicalOp,
    Record,
    Scalar,
    is_missing_value,
)


def is_blank(value: Scalar) -> bool:
    """Truthiness as filter builders see it: None, '', 0, False and NaN are blank."""
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def to_text(value: Scalar) -> str:
    """Render a scalar the way it is compared: lower-cased plain text."""
    if value is None:
        text = "null"
    elif isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, float) and value.is_integer():
        text = str(int(value))
    else:
        text = str(value)
    return text.lower()


def condition_matches(record: Record, condition: FilterCondition) -> bool:
    """True if ``record`` satisfies one condition.

    Missing or blank record values never match, except under ``is_empty``.
    This holds for the negative operators too: a record without ``status``
    does not count as ``status not_equals "closed"``.
    """
    actual = record.get(condition.field) if condition.field else None
    op = condition.op

    if op is FilterOp.is_empty:
        return is_blank(actual)
    if op is FilterOp.is_not_empty:
        return not is_blank(actual)

    if is_blank(actual):
        return False

    haystack = to_text(actual)
    needle = to_text(condition.value)

    if op is FilterOp.equals:
        return haystack == needle
    elif op is FilterOp.not_equals:
        return haystack != needle
    elif op is FilterOp.contains:
        return needle in haystack
    elif op is FilterOp.not_contains:
        return needle not in haystack
    elif op is FilterOp.starts_with:
        return haystack.startswith(needle)
    elif op is FilterOp.ends_with:
        return haystack.endswith(needle)
    else:
        # unrecognised operator from untrusted input
        return False


def group_matches(record: Record, group: FilterGroup) -> bool:
    if group.effective_operator is LogicalOp.AND:
        return all(condition_matches(record, c) for c in group.conditions)
    return any(condition_matches(record, c) for c in group.conditions)


def _config_matches(record: Record, config: FilterConfig) -> bool:
    groups = config.groups or []
    if config.effective_group_operator is LogicalOp.AND:
        return all(group_matches(record, g) for g in groups)
    return any(group_matches(record, g) for g in groups)


def apply_filters(
    records: Sequence[Record],
    config: FilterConfig | Mapping[str, Any] | None,
) -> list[Record]:
    """Return the records that satisfy ``config``, in input order.

    With no config or no groups every record is kept.
    """
    config = FilterConfig.coerce(config)
    if not config.has_groups:
        return list(records)
    return [r for r in records if _config_matches(r, config)]


def count_matching(
    records: Sequence[Record],
    config: FilterConfig | Mapping[str, Any] | None,
) -> int:
    return len(apply_filters(records, config))


def is_filter_empty(config: FilterConfig | Mapping[str, Any] | None) -> bool:
    """True when the filter would not narrow anything a user typed in.

    A config with groups whose conditions all lack values (and are not
    ``is_empty``/``is_not_empty``) counts as empty. "Lacks a value" is the
    same rule the validator applies.
    """
    config = FilterConfig.coerce(config)
    if config.groups is None:
        return True
    return all(
        is_missing_value(c.value) and c.op not in VALUELESS_OPS
        for g in config.groups
        for c in g.conditions
    )


class FilterEngine:
    """Stateless facade over the evaluation functions."""

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger

    def apply(
        self,
        records: Sequence[Record],
        config: FilterConfig | Mapping[str, Any] | None,
    ) -> list[Record]:
        kept = apply_filters(records, config)
        if self._logger:
            self._logger.debug(
                "filter_applied",
                extra={"records_in": len(records), "records_out": len(kept)},
            )
        return kept

    def count(
        self,
        records: Sequence[Record],
        config: FilterConfig | Mapping[str, Any] | None,
    ) -> int:
        return len(self.apply(records, config))

    def matches(self, record: Record, config: FilterConfig | Mapping[str, Any] | None) -> bool:
        config = FilterConfig.coerce(config)
        if not config.has_groups:
            return True
        return _config_matches(record, config)
