from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry, is_row_referenced
from .model import DEPARTMENT_IN_USE, Department
from .repository import DepartmentRepository

_SELECT_WITH_COUNT = """
    SELECT d.department_code, d.department_name, d.gross_salary, COUNT(e.id) AS employee_count
    FROM departments d
    LEFT JOIN employees e ON e.department = d.department_code
"""


def _to_department(row: dict) -> Department:
    return Department(
        department_code=row["department_code"],
        department_name=row["department_name"],
        gross_salary=Decimal(row["gross_salary"] or 0),
        employee_count=int(row.get("employee_count") or 0),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_WITH_COUNT
                + """
                GROUP BY d.department_code, d.department_name, d.gross_salary
                ORDER BY d.department_code
                """
            )
            return [_to_department(r) for r in fetchall(cur)]

    def get_by_code(self, code: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_WITH_COUNT
                + """
                WHERE d.department_code=%s
                GROUP BY d.department_code, d.department_name, d.gross_salary
                """,
                (code,),
            )
            row = fetchone(cur)
            return _to_department(row) if row else None

    def create(self, *, code: str, name: str, gross_salary: Decimal) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO departments (department_code, department_name, gross_salary) VALUES (%s, %s, %s)",
                    (code, name, gross_salary),
                )
        except mysql.connector.IntegrityError as e:
            if is_duplicate_entry(e):
                raise ConflictError("Department code already exists") from e
            raise

    def update(self, *, code: str, name: str, gross_salary: Decimal) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE departments SET department_name=%s, gross_salary=%s WHERE department_code=%s",
                (name, gross_salary, code),
            )

    def count_employees(self, code: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees WHERE department=%s", (code,))
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def delete(self, code: str) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM departments WHERE department_code=%s", (code,))
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as e:
            # An employee was assigned between the count check and the delete.
            if is_row_referenced(e):
                raise ConflictError(DEPARTMENT_IN_USE) from e
            raise
