"""Tool registry for the MCP server.

Tools take JSON text and return JSON text. Bad input never raises out of a
tool; it comes back as ``{"error": ...}``.
"""

from __future__ import annotations

import json
import time
from typing import Any

from pydantic import ValidationError

from ...domain.description import describe_filter
from ...domain.filter_engine import apply_filters
from ...domain.filter_semantics import ALL_RULES
from ...domain.filters import DEFAULT_GROUP_COMBINATOR, DEFAULT_GROUP_OPERATOR, FilterConfig, LogicalOp
from ...errors import InvalidFilterError
from ...observability import log_filter_invocation
from ..validation import supported_operators, validate_filter

FILTER_TOOLS = frozenset({
    "filters_apply",
    "filters_describe",
    "filters_validate",
    "filters_search",
    "filters_capabilities",
})


def _get_filter_service():
    from ...wiring import build_filter_service
    return build_filter_service()


def _parse_filter(filter_json: str) -> FilterConfig:
    raw = json.loads(filter_json) if filter_json.strip() else None
    if raw is not None and not isinstance(raw, dict):
        raise ValueError("filter must be a JSON object")
    return FilterConfig.coerce(raw)


def _parse_records(records_json: str) -> list[dict[str, Any]]:
    raw = json.loads(records_json)
    if not isinstance(raw, list) or not all(isinstance(r, dict) for r in raw):
        raise ValueError("records must be a JSON list of objects")
    return raw


def _error(tool: str, t0: float, message: str, **extra: Any) -> str:
    log_filter_invocation(tool, (time.monotonic() - t0) * 1000, error=message)
    return json.dumps({"error": message, **extra})


def register_filter_tools(mcp):
    """Register the filter tools on a FastMCP server."""

    @mcp.tool()
    def filters_apply(filter_json: str, records_json: str) -> str:
        """Filter caller-supplied records in memory.

        Args:
            filter_json: Filter config, e.g. {"groups": [{"conditions": [...]}], "groupOperator": "OR"}
            records_json: JSON list of flat records

        Returns:
            JSON with records (input order), count and description
        """
        t0 = time.monotonic()
        try:
            config = _parse_filter(filter_json)
            records = _parse_records(records_json)
        except (ValueError, ValidationError) as e:
            return _error("filters_apply", t0, str(e))
        kept = apply_filters(records, config)
        log_filter_invocation(
            "filters_apply",
            (time.monotonic() - t0) * 1000,
            extra={"records_in": len(records), "records_out": len(kept)},
        )
        return json.dumps({
            "records": kept,
            "count": len(kept),
            "description": describe_filter(config),
        }, indent=2)

    @mcp.tool()
    def filters_describe(filter_json: str) -> str:
        """Render a filter config as readable text."""
        t0 = time.monotonic()
        try:
            config = _parse_filter(filter_json)
        except (ValueError, ValidationError) as e:
            return _error("filters_describe", t0, str(e))
        log_filter_invocation("filters_describe", (time.monotonic() - t0) * 1000)
        return json.dumps({"description": describe_filter(config)})

    @mcp.tool()
    def filters_validate(filter_json: str) -> str:
        """Check every condition for a field, an operator and (where needed) a value.

        Returns:
            JSON with valid, errors, warnings
        """
        t0 = time.monotonic()
        try:
            config = _parse_filter(filter_json)
        except (ValueError, ValidationError) as e:
            return _error("filters_validate", t0, str(e))
        result = validate_filter(config)
        log_filter_invocation(
            "filters_validate",
            (time.monotonic() - t0) * 1000,
            extra={"valid": result.is_valid},
        )
        return json.dumps(result.to_dict(), indent=2)

    @mcp.tool()
    def filters_search(filter_json: str) -> str:
        """Run a filter against the configured record store.

        Returns:
            JSON with records, count, description and strategy ('remote' or 'client')
        """
        t0 = time.monotonic()
        try:
            config = _parse_filter(filter_json)
            result = _get_filter_service().search(config)
        except InvalidFilterError as e:
            return _error("filters_search", t0, "invalid filter", errors=e.errors)
        except (ValueError, ValidationError) as e:
            return _error("filters_search", t0, str(e))
        log_filter_invocation(
            "filters_search",
            (time.monotonic() - t0) * 1000,
            extra={"strategy": result.strategy, "count": result.count},
        )
        return json.dumps(result.model_dump(), indent=2, default=str)

    @mcp.tool()
    def filters_capabilities() -> str:
        """Supported operators, logical operators, defaults and evaluation rules."""
        return json.dumps({
            "operators": supported_operators(),
            "logical_operators": [op.value for op in LogicalOp],
            "defaults": {
                "group_operator": DEFAULT_GROUP_OPERATOR.value,
                "top_level_group_operator": DEFAULT_GROUP_COMBINATOR.value,
            },
            "rules": list(ALL_RULES),
        })
