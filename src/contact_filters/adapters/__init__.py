"""Concrete adapters for the ports."""

from .sqlite_store import SqliteQuery, SqliteRecordStore

__all__ = ["SqliteQuery", "SqliteRecordStore"]
