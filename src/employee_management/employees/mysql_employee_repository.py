from __future__ import annotations

from contextlib import contextmanager
from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import ConflictError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry, is_missing_parent
from .model import Employee, EmployeeData
from .repository import EmployeeRepository

_COLUMNS = "id, first_name, last_name, email, phone, address, position, department, hire_date, created_at"


def _to_employee(row: dict) -> Employee:
    return Employee(
        id=int(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        phone=row.get("phone"),
        address=row.get("address"),
        position=row.get("position"),
        department=row.get("department"),
        hire_date=row.get("hire_date"),
        created_at=row.get("created_at"),
    )


def _params(data: EmployeeData) -> tuple:
    return (
        data.first_name,
        data.last_name,
        data.email,
        data.phone,
        data.address,
        data.position,
        data.department,
        data.hire_date,
    )


@contextmanager
def _translate_integrity_errors():
    try:
        yield
    except mysql.connector.IntegrityError as e:
        if is_duplicate_entry(e):
            raise ConflictError("Email already exists") from e
        if is_missing_parent(e):
            raise ValidationError("Department does not exist") from e
        raise


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY last_name, first_name")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def email_taken(self, email: str, *, exclude_id: Optional[int] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if exclude_id is None:
                cur.execute("SELECT id FROM employees WHERE email=%s LIMIT 1", (email,))
            else:
                cur.execute("SELECT id FROM employees WHERE email=%s AND id<>%s LIMIT 1", (email, int(exclude_id)))
            return fetchone(cur) is not None

    def create(self, data: EmployeeData) -> int:
        with _translate_integrity_errors():
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees
                        (first_name, last_name, email, phone, address, position, department, hire_date)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                    """,
                    _params(data),
                )
                return int(cur.lastrowid)

    def update(self, employee_id: int, data: EmployeeData) -> None:
        with _translate_integrity_errors():
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE employees
                    SET first_name=%s, last_name=%s, email=%s, phone=%s, address=%s,
                        position=%s, department=%s, hire_date=%s
                    WHERE id=%s
                    """,
                    _params(data) + (int(employee_id),),
                )

    def delete(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0
