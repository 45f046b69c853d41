"""Adapter: SQLite-backed record store implementing RecordStorePort."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from ..config.runtime import FilterSettings
from ..domain.filter_engine import to_text
from ..domain.filters import Scalar

# SQL name under which to_text is registered on every store connection
TEXT_FUNCTION = "cf_text"


def quote_identifier(name: str) -> str:
    """Double-quote an identifier, doubling internal quotes."""
    return '"' + name.replace('"', '""') + '"'


def storable(value: Scalar) -> Scalar:
    """Map a scalar onto one SQLite keeps without changing how filters see it.

    SQLite has no boolean type. True is stored as the text the engine compares
    it as, and False (blank to the engine) is stored as NULL.
    """
    if isinstance(value, bool):
        return to_text(value) if value else None
    return value


@dataclass(frozen=True)
class SqliteQuery:
    """Immutable chainable query over one table; predicates are ANDed."""

    table: str
    clauses: tuple[str, ...] = ()
    params: tuple[Any, ...] = ()

    def _where(self, clause: str, *params: Any) -> SqliteQuery:
        return replace(self, clauses=self.clauses + (clause,), params=self.params + params)

    def select_all(self) -> SqliteQuery:
        return replace(self, clauses=(), params=())

    def is_null(self, field: str) -> SqliteQuery:
        return self._where(f"{quote_identifier(field)} IS NULL")

    def is_not_null(self, field: str) -> SqliteQuery:
        return self._where(f"{quote_identifier(field)} IS NOT NULL")

    def eq(self, field: str, value: Scalar) -> SqliteQuery:
        return self._where(f"{quote_identifier(field)} = ?", value)

    def not_eq(self, field: str, value: Scalar) -> SqliteQuery:
        return self._where(f"{quote_identifier(field)} <> ?", value)

    def ilike(self, field: str, pattern: str) -> SqliteQuery:
        # match against the engine's text rendering; SQLite folds ASCII case only
        return self._where(
            f"{TEXT_FUNCTION}({quote_identifier(field)}) LIKE ? ESCAPE '\\'", pattern.lower()
        )

    def to_sql(self) -> tuple[str, list[Any]]:
        sql = f"SELECT * FROM {quote_identifier(self.table)}"
        if self.clauses:
            sql += " WHERE " + " AND ".join(self.clauses)
        sql += " ORDER BY rowid"
        return sql, list(self.params)


class SqliteRecordStore:
    """Concrete RecordStorePort backed by a single SQLite table.

    Columns are untyped so values come back with the scalar type they were
    stored with. Booleans are the exception, see ``storable``.
    """

    def __init__(self, settings: FilterSettings) -> None:
        self._db_path = settings.database_path
        self._table = settings.collection_name
        self._ensure_parent_dir()

    @property
    def table(self) -> str:
        return self._table

    def _ensure_parent_dir(self) -> None:
        path = Path(self._db_path)
        if path.parent.exists():
            return
        path.parent.mkdir(parents=True, exist_ok=True)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        conn.create_function(TEXT_FUNCTION, 1, to_text, deterministic=True)
        return conn

    def _columns(self, conn: sqlite3.Connection) -> list[str]:
        rows = conn.execute(f"PRAGMA table_info({quote_identifier(self._table)})").fetchall()
        return [r["name"] for r in rows]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def query_builder(self) -> SqliteQuery:
        return SqliteQuery(table=self._table)

    def execute(self, query: SqliteQuery) -> list[dict]:
        if not isinstance(query, SqliteQuery):
            raise TypeError(f"SqliteRecordStore cannot execute {type(query).__name__}")
        with self._connect() as conn:
            if not self._columns(conn):
                return []
            sql, params = query.to_sql()
            try:
                rows = conn.execute(sql, params).fetchall()
            except sqlite3.OperationalError as e:
                # a predicate on a column the table does not have
                if "no such column" in str(e):
                    return []
                raise
        return [dict(row) for row in rows]

    def count(self) -> int:
        with self._connect() as conn:
            if not self._columns(conn):
                return 0
            row = conn.execute(f"SELECT COUNT(*) FROM {quote_identifier(self._table)}").fetchone()
        return int(row[0])

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def ensure_table(self, columns: Iterable[str]) -> list[str]:
        """Create the table or add missing columns. Returns the final column list."""
        wanted = list(dict.fromkeys(columns))
        with self._connect() as conn:
            existing = self._columns(conn)
            if not existing:
                if not wanted:
                    raise ValueError("cannot create a table with no columns")
                cols = ", ".join(quote_identifier(c) for c in wanted)
                conn.execute(f"CREATE TABLE {quote_identifier(self._table)} ({cols})")
            else:
                for col in wanted:
                    if col not in existing:
                        conn.execute(
                            f"ALTER TABLE {quote_identifier(self._table)} ADD COLUMN {quote_identifier(col)}"
                        )
            return self._columns(conn)

    def insert_records(self, records: Iterable[Mapping[str, Scalar]]) -> int:
        records = list(records)
        if not records:
            return 0
        self.ensure_table(key for r in records for key in r)
        with self._connect() as conn:
            for record in records:
                cols = list(record.keys())
                if not cols:
                    conn.execute(f"INSERT INTO {quote_identifier(self._table)} DEFAULT VALUES")
                    continue
                placeholders = ", ".join("?" for _ in cols)
                conn.execute(
                    f"INSERT INTO {quote_identifier(self._table)} "
                    f"({', '.join(quote_identifier(c) for c in cols)}) VALUES ({placeholders})",
                    [storable(record[c]) for c in cols],
                )
        return len(records)

    def delete_all(self) -> None:
        """Drop the table; the next insert recreates it from the new records."""
        with self._connect() as conn:
            conn.execute(f"DROP TABLE IF EXISTS {quote_identifier(self._table)}")
