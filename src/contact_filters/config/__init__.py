"""Runtime configuration."""

from .runtime import FilterSettings, get_settings

__all__ = ["FilterSettings", "get_settings"]
