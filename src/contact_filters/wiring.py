"""Composition root: single place where all wiring happens.

Call ``build_filter_service()`` to get a fully-constructed service with the
SQLite record store. No ad-hoc construction elsewhere.
"""

from __future__ import annotations

from .adapters.sqlite_store import SqliteRecordStore
from .config.runtime import FilterSettings, get_settings
from .observability import get_logger
from .services.filter_service import FilterService


def build_record_store(settings: FilterSettings | None = None) -> SqliteRecordStore:
    settings = settings or get_settings()
    return SqliteRecordStore(settings)


def build_filter_service(settings: FilterSettings | None = None) -> FilterService:
    """Construct a FilterService with real adapters."""
    settings = settings or get_settings()
    return FilterService(
        record_store=build_record_store(settings),
        settings=settings,
        logger=get_logger("service"),
    )
