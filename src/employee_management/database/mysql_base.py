from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.constants import ER_DUP_ENTRY, ER_NO_REFERENCED_ROW, ER_ROW_IS_REFERENCED
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    with conn_factory.connect() as conn:
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


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def is_duplicate_entry(err: mysql.connector.Error) -> bool:
    return getattr(err, "errno", None) == ER_DUP_ENTRY


def is_row_referenced(err: mysql.connector.Error) -> bool:
    return getattr(err, "errno", None) == ER_ROW_IS_REFERENCED


def is_missing_parent(err: mysql.connector.Error) -> bool:
    return getattr(err, "errno", None) == ER_NO_REFERENCED_ROW
