from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import CurrentSalaryRow, PayrollRow


class ReportRepository(Protocol):
    def current_salary_rows(self, *, today: date) -> Sequence[CurrentSalaryRow]:
        """Every department joined with its employees and their current salary.

        A department without employees yields one row with ``employee_id`` None.
        """

        raise NotImplementedError

    def monthly_payroll_rows(self, *, month_start: date, month_end: date) -> Sequence[PayrollRow]:
        raise NotImplementedError
