from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import CurrentSalaryRow, PayrollRow
from .repository import ReportRepository


def _decimal(value) -> Optional[Decimal]:
    return Decimal(value) if value is not None else None


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def current_salary_rows(self, *, today: date) -> Sequence[CurrentSalaryRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    d.department_code,
                    d.department_name,
                    d.gross_salary AS base_salary,
                    e.id AS employee_id,
                    (
                        SELECT s.amount
                        FROM salaries s
                        WHERE s.employee_id = e.id
                          AND (s.end_date IS NULL OR s.end_date > %(today)s)
                        ORDER BY s.effective_date DESC, s.id DESC
                        LIMIT 1
                    ) AS amount
                FROM departments d
                LEFT JOIN employees e ON e.department = d.department_code

                UNION ALL

                SELECT NULL, NULL, NULL, e.id,
                    (
                        SELECT s.amount
                        FROM salaries s
                        WHERE s.employee_id = e.id
                          AND (s.end_date IS NULL OR s.end_date > %(today)s)
                        ORDER BY s.effective_date DESC, s.id DESC
                        LIMIT 1
                    )
                FROM employees e
                WHERE e.department IS NULL
                """,
                {"today": today},
            )
            return [
                CurrentSalaryRow(
                    department_code=r.get("department_code"),
                    department_name=r.get("department_name"),
                    base_salary=_decimal(r.get("base_salary")),
                    employee_id=int(r["employee_id"]) if r.get("employee_id") is not None else None,
                    amount=_decimal(r.get("amount")),
                )
                for r in fetchall(cur)
            ]

    def monthly_payroll_rows(self, *, month_start: date, month_end: date) -> Sequence[PayrollRow]:
        # gross: salary in force during the month, else the department base figure
        # net: gross minus the month's deductions
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    p.employee_id, p.first_name, p.last_name, p.position,
                    p.department_code, p.department_name, p.base_salary,
                    COALESCE(p.salary_amount, p.base_salary) AS gross_salary,
                    p.deduction,
                    COALESCE(p.salary_amount, p.base_salary) - p.deduction AS net_salary
                FROM (
                    SELECT
                        e.id AS employee_id,
                        e.first_name,
                        e.last_name,
                        e.position,
                        d.department_code,
                        d.department_name,
                        d.gross_salary AS base_salary,
                        (
                            SELECT s.amount
                            FROM salaries s
                            WHERE s.employee_id = e.id
                              AND s.effective_date <= %(month_end)s
                              AND (s.end_date IS NULL OR s.end_date >= %(month_start)s)
                            ORDER BY s.effective_date DESC, s.id DESC
                            LIMIT 1
                        ) AS salary_amount,
                        (
                            SELECT COALESCE(SUM(dd.amount), 0)
                            FROM deductions dd
                            WHERE dd.employee_id = e.id AND dd.pay_month = %(month_start)s
                        ) AS deduction
                    FROM employees e
                    LEFT JOIN departments d ON d.department_code = e.department
                    WHERE e.hire_date IS NULL OR e.hire_date <= %(month_end)s
                ) p
                WHERE COALESCE(p.salary_amount, p.base_salary) IS NOT NULL
                ORDER BY p.department_name, p.last_name, p.first_name
                """,
                {"month_start": month_start, "month_end": month_end},
            )
            return [
                PayrollRow(
                    employee_id=int(r["employee_id"]),
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    position=r.get("position"),
                    department_code=r.get("department_code"),
                    department_name=r.get("department_name"),
                    base_salary=_decimal(r.get("base_salary")),
                    gross_salary=Decimal(r["gross_salary"]),
                    deduction=Decimal(r["deduction"] or 0),
                    net_salary=Decimal(r["net_salary"]),
                )
                for r in fetchall(cur)
            ]
