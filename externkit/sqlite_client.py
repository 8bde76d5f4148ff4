"""A small SQLite client with string-bound parameters."""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any


@contextmanager
def _sqlite_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        raise RuntimeError(str(exc)) from exc


def _as_text(value: Any) -> str:
    """Bind strings as they are; anything else binds as an empty string."""
    return value if isinstance(value, str) else ""


class SqliteClient:
    """A thread-safe connection to one SQLite database in autocommit mode."""

    def __init__(self, connection_string: str) -> None:
        with _sqlite_errors():
            self._connection = sqlite3.connect(
                connection_string, isolation_level=None, check_same_thread=False
            )
        self._lock = threading.RLock()

    def __enter__(self) -> "SqliteClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _execute(self, sql: str, params: Sequence[str] = ()) -> sqlite3.Cursor:
        with self._lock, _sqlite_errors():
            return self._connection.execute(sql, tuple(params))

    def query(self, query: str, params: Iterable[Any] = ()) -> list[Any]:
        """Run a statement and return its rows.

        A row with one column is returned as its value alone; wider rows are
        returned as tuples.
        """
        bound = [_as_text(p) for p in params]
        with self._lock, _sqlite_errors():
            cursor = self._connection.execute(query, bound)
            rows = cursor.fetchall()
        return [row[0] if len(row) == 1 else tuple(row) for row in rows]

    def create_table(
        self, table_name: str, columns: Iterable[tuple[str, str]]
    ) -> None:
        """Create a table from (name, type) pairs unless it already exists."""
        definition = ", ".join(f"{name} {type_}" for name, type_ in columns)
        self._execute(f"CREATE TABLE IF NOT EXISTS {table_name} ({definition})")

    def insert(
        self, table_name: str, columns: Sequence[str], values: Sequence[Any]
    ) -> None:
        """Insert one row."""
        placeholders = ", ".join("?" for _ in values)
        sql = (
            f"INSERT INTO {table_name} ({', '.join(columns)}) "
            f"VALUES ({placeholders})"
        )
        self._execute(sql, [_as_text(v) for v in values])

    def select(
        self,
        table_name: str,
        columns: Sequence[str],
        where_clause: str | None = None,
    ) -> list[Any]:
        """Select columns from a table, optionally filtered."""
        sql = f"SELECT {', '.join(columns)} FROM {table_name}"
        if where_clause is not None:
            sql += f" WHERE {where_clause}"
        return self.query(sql, [])

    def delete(self, table_name: str, where_clause: str) -> int:
        """Delete matching rows and return how many were removed."""
        return self._execute(f"DELETE FROM {table_name} WHERE {where_clause}").rowcount

    def update(self, table_name: str, set_clause: str, where_clause: str) -> int:
        """Update matching rows and return how many were changed."""
        sql = f"UPDATE {table_name} SET {set_clause} WHERE {where_clause}"
        return self._execute(sql).rowcount

    def close(self) -> None:
        """Close the connection."""
        with self._lock:
            self._connection.close()