"""Structural validation for user-built filter configs.

Errors are display-ready strings that point at the group and condition
position (1-indexed). Warnings flag configs that are valid but will not
behave the way their author probably expects.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..domain.filters import (
    AND_SPELLINGS,
    VALUELESS_OPS,
    FilterCondition,
    FilterConfig,
    FilterOp,
    LogicalOp,
    is_missing_value,
)


class ValidationResult:
    """Result of filter validation."""

    def __init__(self, is_valid: bool = True, errors: list[str] | None = None, warnings: list[str] | None = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON response."""
        return {
            "valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
        }

    def add_error(self, error: str) -> ValidationResult:
        """Add an error and return self for chaining."""
        self.errors.append(error)
        self.is_valid = False
        return self

    def add_warning(self, warning: str) -> ValidationResult:
        """Add a warning and return self for chaining."""
        self.warnings.append(warning)
        return self


def _is_logical_text(raw: str | None) -> bool:
    # "And" or "aNd" silently combine as OR, so they are flagged too
    return not raw or raw in AND_SPELLINGS or raw.upper() == LogicalOp.OR.value


def validate_filter(config: FilterConfig | Mapping[str, Any] | None) -> ValidationResult:
    """Validate every condition of every group.

    Returns:
        ValidationResult; ``is_valid`` is True iff there are no errors.
    """
    result = ValidationResult(is_valid=True)
    config = FilterConfig.coerce(config)
    if not config.has_groups:
        return result

    if not _is_logical_text(config.group_operator):
        result.add_warning(
            f"groupOperator {config.group_operator!r} is not AND/OR; groups will combine with OR"
        )

    for g_idx, group in enumerate(config.groups, start=1):
        if not _is_logical_text(group.raw_operator):
            result.add_warning(
                f"Group {g_idx}: operator {group.raw_operator!r} is not AND/OR; conditions will combine with OR"
            )
        if not group.conditions:
            result.add_warning(f"Group {g_idx}: has no conditions")
        for c_idx, condition in enumerate(group.conditions, start=1):
            _validate_condition(condition, f"Group {g_idx}, Condition {c_idx}", result)

    return result


def _validate_condition(condition: FilterCondition, where: str, result: ValidationResult) -> None:
    if not condition.field:
        result.add_error(f"{where}: Field is required")

    if not condition.operator:
        result.add_error(f"{where}: Operator is required")
    elif condition.op is None:
        result.add_warning(f"{where}: Unknown operator {condition.operator!r} never matches")

    if condition.op not in VALUELESS_OPS and is_missing_value(condition.value):
        result.add_error(f"{where}: Value is required")


def supported_operators() -> list[str]:
    return [op.value for op in FilterOp]
