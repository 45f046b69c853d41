"""Pydantic-based runtime settings.

Loads from environment variables (prefix ``CONTACT_FILTERS_``) with an
optional .env file.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class FilterSettings(BaseSettings):
    """All configuration for the filter service, validated at startup."""

    model_config = {
        "env_prefix": "CONTACT_FILTERS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # --- Record store ---
    database_path: str = Field(default="data/contacts.db", description="SQLite database file")
    collection_name: str = Field(default="contacts", description="Table holding the records")

    # --- Remote translation ---
    remote_pushdown: bool = Field(
        default=True,
        description="Translate pushdown-safe filters into the store query before evaluating in memory",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level for CLI and MCP server")

    # --- MCP ---
    mcp_server_name: str = Field(default="contact-filters", description="Name advertised by the MCP server")

    @field_validator("collection_name")
    @classmethod
    def _collection_identifier(cls, v: str) -> str:
        if not _IDENT_RE.match(v):
            raise ValueError(f"collection_name must be a plain identifier, got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> FilterSettings:
    """Return the singleton FilterSettings (cached after first call)."""
    return FilterSettings()
