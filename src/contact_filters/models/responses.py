"""Response DTOs for filter searches."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class FilterResult(BaseModel):
    """Records kept by a filter plus how they were obtained."""

    records: list[dict[str, Any]] = Field(default_factory=list, description="Matching records, input order")
    count: int = Field(..., ge=0, description="Number of matching records")
    description: str = Field(..., description="Human-readable filter text")
    strategy: Literal["remote", "client", "memory"] = Field(
        ...,
        description="'remote': translated query pushed to the store; "
        "'client': full fetch then in-memory filter; 'memory': caller-supplied records",
    )
