"""Domain layer for contact filters."""

from .description import describe_filter
from .filter_engine import (
    FilterEngine,
    apply_filters,
    condition_matches,
    count_matching,
    group_matches,
    is_filter_empty,
)
from .filter_semantics import (
    RULE_BLANK_NEVER_MATCHES,
    RULE_CASE_INSENSITIVE,
    RULE_EMPTY_OPERATORS,
    RULE_GROUP_DEFAULT_AND,
    RULE_NO_GROUPS_KEEPS_ALL,
    RULE_REMOTE_FIRST_GROUP_ONLY,
    RULE_REMOTE_SUPERSET_PUSHDOWN,
    RULE_TOP_LEVEL_DEFAULT_OR,
    RULE_UNKNOWN_OPERATOR,
)
from .filters import (
    DEFAULT_GROUP_COMBINATOR,
    DEFAULT_GROUP_OPERATOR,
    FilterCondition,
    FilterConfig,
    FilterGroup,
    FilterOp,
    LogicalOp,
)
from .query_translator import QueryTranslator

__all__ = [
    "DEFAULT_GROUP_COMBINATOR",
    "DEFAULT_GROUP_OPERATOR",
    "FilterCondition",
    "FilterConfig",
    "FilterEngine",
    "FilterGroup",
    "FilterOp",
    "LogicalOp",
    "QueryTranslator",
    "apply_filters",
    "condition_matches",
    "count_matching",
    "describe_filter",
    "group_matches",
    "is_filter_empty",
    "RULE_BLANK_NEVER_MATCHES",
    "RULE_CASE_INSENSITIVE",
    "RULE_EMPTY_OPERATORS",
    "RULE_GROUP_DEFAULT_AND",
    "RULE_NO_GROUPS_KEEPS_ALL",
    "RULE_REMOTE_FIRST_GROUP_ONLY",
    "RULE_REMOTE_SUPERSET_PUSHDOWN",
    "RULE_TOP_LEVEL_DEFAULT_OR",
    "RULE_UNKNOWN_OPERATOR",
]
