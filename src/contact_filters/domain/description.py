"""Human-readable rendering of a filter tree."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .filter_engine import is_blank, to_text
from .filters import FilterCondition, FilterConfig, FilterGroup, FilterOp

NO_FILTERS_TEXT = "No filters applied"

_WORD_START_RE = re.compile(r"\b\w")


def humanize_field(field: str | None) -> str:
    """``first_name`` -> ``First Name``."""
    label = (field or "").replace("_", " ")
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), label)


def describe_condition(condition: FilterCondition) -> str:
    label = humanize_field(condition.field)
    op = condition.op
    if op is FilterOp.is_empty:
        return f"{label} is empty"
    if op is FilterOp.is_not_empty:
        return f"{label} is not empty"

    operator_text = (condition.operator or "").replace("_", " ")
    if is_blank(condition.value):
        value_text = "(empty)"
    elif isinstance(condition.value, str):
        value_text = condition.value
    else:
        value_text = to_text(condition.value)
    return f'{label} {operator_text} "{value_text}"'


def describe_group(group: FilterGroup) -> str:
    joiner = f" {group.effective_operator.value.lower()} "
    return joiner.join(describe_condition(c) for c in group.conditions)


def describe_filter(config: FilterConfig | Mapping[str, Any] | None) -> str:
    """Render the whole tree, e.g. ``(Status equals "open") OR (City is empty)``.

    Groups are parenthesised only when there is more than one. The
    separator between groups is the config's ``groupOperator`` text as given.
    """
    config = FilterConfig.coerce(config)
    if not config.has_groups:
        return NO_FILTERS_TEXT

    groups = config.groups
    parts = [describe_group(g) for g in groups]
    if len(groups) > 1:
        parts = [f"({p})" for p in parts]
    separator = config.group_operator or config.effective_group_operator.value
    return f" {separator} ".join(parts)
