"""Response DTOs."""

from .responses import FilterResult

__all__ = ["FilterResult"]
