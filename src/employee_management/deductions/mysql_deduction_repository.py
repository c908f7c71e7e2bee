from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, is_missing_parent
from .model import Deduction
from .repository import DeductionRepository


class MySQLDeductionRepository(DeductionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[Deduction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, pay_month, amount, description
                FROM deductions
                WHERE employee_id=%s
                ORDER BY pay_month DESC, id DESC
                """,
                (int(employee_id),),
            )
            return [
                Deduction(
                    id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    pay_month=r["pay_month"],
                    amount=Decimal(r["amount"]),
                    description=r.get("description"),
                )
                for r in fetchall(cur)
            ]

    def create(self, *, employee_id: int, pay_month: date, amount: Decimal, description: Optional[str]) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO deductions (employee_id, pay_month, amount, description) VALUES (%s, %s, %s, %s)",
                    (int(employee_id), pay_month, amount, description),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_missing_parent(e):
                raise NotFoundError("Employee not found") from e
            raise

    def delete(self, deduction_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM deductions WHERE id=%s", (int(deduction_id),))
            return cur.rowcount > 0
