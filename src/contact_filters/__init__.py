"""Advanced contact filter engine: in-memory evaluation, remote query translation,
descriptions and validation for nested AND/OR filter trees."""

from .domain import (
    FilterCondition,
    FilterConfig,
    FilterEngine,
    FilterGroup,
    FilterOp,
    LogicalOp,
    QueryTranslator,
    apply_filters,
    count_matching,
    describe_filter,
    is_filter_empty,
)
from .interface.validation import ValidationResult, validate_filter

__version__ = "0.1.0"
__all__ = [
    "FilterCondition",
    "FilterConfig",
    "FilterEngine",
    "FilterGroup",
    "FilterOp",
    "LogicalOp",
    "QueryTranslator",
    "ValidationResult",
    "apply_filters",
    "count_matching",
    "describe_filter",
    "is_filter_empty",
    "validate_filter",
]
