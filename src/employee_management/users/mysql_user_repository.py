from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_entry
from .model import User
from .repository import UserRepository

_USER_COLUMNS = "id, username, password, first_name, last_name, email"


def _to_user(row: dict) -> User:
    return User(
        id=int(row["id"]),
        username=row["username"],
        password_hash=row["password"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE username=%s", (username,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def exists_username_or_email(self, *, username: str, email: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM users WHERE username=%s OR email=%s LIMIT 1", (username, email))
            return fetchone(cur) is not None

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users (username, password, first_name, last_name, email)
                    VALUES (%s, %s, %s, %s, %s)
                    """,
                    (username, password_hash, first_name, last_name, email),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_entry(e):
                raise ConflictError("Username or email already exists") from e
            raise
