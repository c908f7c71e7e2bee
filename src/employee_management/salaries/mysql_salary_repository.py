from __future__ import annotations

from decimal import Decimal
from typing import Sequence

import mysql.connector

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, is_missing_parent
from .model import Salary, SalaryData
from .repository import SalaryRepository


def _to_salary(row: dict) -> Salary:
    return Salary(
        id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        amount=Decimal(row["amount"]),
        effective_date=row["effective_date"],
        end_date=row.get("end_date"),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.id, s.employee_id, s.amount, s.effective_date, s.end_date,
                       e.first_name, e.last_name
                FROM salaries s
                JOIN employees e ON s.employee_id = e.id
                ORDER BY s.effective_date DESC, s.id DESC
                """
            )
            return [_to_salary(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: int) -> Sequence[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, amount, effective_date, end_date
                FROM salaries
                WHERE employee_id=%s
                ORDER BY effective_date DESC, id DESC
                """,
                (int(employee_id),),
            )
            return [_to_salary(r) for r in fetchall(cur)]

    def create(self, employee_id: int, data: SalaryData) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO salaries (employee_id, amount, effective_date, end_date) VALUES (%s, %s, %s, %s)",
                    (int(employee_id), data.amount, data.effective_date, data.end_date),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_missing_parent(e):
                raise NotFoundError("Employee not found") from e
            raise

    def update(self, salary_id: int, data: SalaryData) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE salaries SET amount=%s, effective_date=%s, end_date=%s WHERE id=%s",
                (data.amount, data.effective_date, data.end_date, int(salary_id)),
            )
            return cur.rowcount > 0

    def delete(self, salary_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salaries WHERE id=%s", (int(salary_id),))
            return cur.rowcount > 0
