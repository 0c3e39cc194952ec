from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection, one transaction: commit on success, rollback on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def update_columns(cur, *, table: str, key_column: str, key: int, values: Mapping[str, Any]) -> None:
    """UPDATE only the given columns. Column names come from code, never from input."""
    if not values:
        return
    assignments = ", ".join(f"{col}=%s" for col in values)
    cur.execute(
        f"UPDATE {table} SET {assignments} WHERE {key_column}=%s",
        tuple(values.values()) + (int(key),),
    )
