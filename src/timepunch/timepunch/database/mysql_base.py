from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

import mysql.connector

from ..core.exceptions import DataSourceError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator:
    """Yield ``(conn, cursor)``; connector failures surface as DataSourceError."""

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise DataSourceError(f"cannot connect to database: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise DataSourceError(f"database query failed: {e}") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def in_clause(values: list) -> str:
    """Placeholder list for ``IN (...)``; callers must not pass an empty list."""
    return ", ".join(["%s"] * len(values))
