"""Typed advanced-filter tree: conditions, groups and the top-level config."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

Scalar = Union[str, int, float, bool, None]
Record = Mapping[str, Scalar]


class FilterOp(str, Enum):
    """Supported condition operators."""

    equals = "equals"               # field == value
    not_equals = "not_equals"       # field != value
    contains = "contains"           # value is a substring of field
    not_contains = "not_contains"   # value is not a substring of field
    starts_with = "starts_with"
    ends_with = "ends_with"
    is_empty = "is_empty"           # no value needed
    is_not_empty = "is_not_empty"   # no value needed

    @classmethod
    def parse(cls, raw: Any) -> FilterOp | None:
        """Return the operator for ``raw``, or None if it is not recognised."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            return None


class LogicalOp(str, Enum):
    """Boolean combinator for conditions within a group, or for groups."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def parse(cls, raw: Any) -> LogicalOp:
        """Only "AND" or "and" combine as AND; anything else is OR."""
        if isinstance(raw, str) and raw in AND_SPELLINGS:
            return cls.AND
        return cls.OR


AND_SPELLINGS = frozenset({"AND", "and"})


# Conditions inside a group default to AND; groups default to OR.
DEFAULT_GROUP_OPERATOR = LogicalOp.AND
DEFAULT_GROUP_COMBINATOR = LogicalOp.OR

VALUELESS_OPS = frozenset({FilterOp.is_empty, FilterOp.is_not_empty})


def is_missing_value(value: Any) -> bool:
    """A condition value counts as not entered when None or whitespace-only text.

    Numeric zero and False are real values.
    """
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class FilterCondition(BaseModel):
    """A single field/operator/value rule."""

    model_config = ConfigDict(populate_by_name=True)

    field: str | None = Field(default=None, description="Record field name")
    operator: str | None = Field(
        default=None,
        description="Operator name; unknown names are kept and never match",
    )
    value: Scalar = Field(default=None, description="Comparison value")

    @property
    def op(self) -> FilterOp | None:
        return FilterOp.parse(self.operator)


class FilterGroup(BaseModel):
    """Conditions combined by one boolean operator."""

    model_config = ConfigDict(populate_by_name=True)

    conditions: list[FilterCondition] = Field(default_factory=list)
    operator: str | None = Field(default=None)
    logical_operator: str | None = Field(default=None, alias="logicalOperator")

    @property
    def raw_operator(self) -> str | None:
        return self.operator or self.logical_operator

    @property
    def effective_operator(self) -> LogicalOp:
        raw = self.raw_operator
        if not raw:
            return DEFAULT_GROUP_OPERATOR
        return LogicalOp.parse(raw)


class FilterConfig(BaseModel):
    """The full filter tree: groups combined by a top-level operator."""

    model_config = ConfigDict(populate_by_name=True)

    groups: list[FilterGroup] | None = Field(default=None)
    group_operator: str | None = Field(default=None, alias="groupOperator")

    @property
    def has_groups(self) -> bool:
        return bool(self.groups)

    @property
    def effective_group_operator(self) -> LogicalOp:
        if not self.group_operator:
            return DEFAULT_GROUP_COMBINATOR
        return LogicalOp.parse(self.group_operator)

    @classmethod
    def coerce(cls, obj: FilterConfig | Mapping[str, Any] | None) -> FilterConfig:
        """Accept an instance, a plain mapping (camelCase or snake_case) or None."""
        if obj is None:
            return cls()
        if isinstance(obj, cls):
            return obj
        return cls.model_validate(dict(obj))

    def to_dict(self) -> dict[str, Any]:
        """camelCase dict, the shape filter builders exchange."""
        return self.model_dump(by_alias=True, exclude_none=True)
