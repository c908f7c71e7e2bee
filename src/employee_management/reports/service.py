from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ..common import datetime_utils
from ..common.datetime_utils import month_bounds, parse_month
from .model import DepartmentPayroll, DepartmentSummary, PayrollRow
from .repository import ReportRepository

CENT = Decimal("0.01")


def _average(values: Sequence[Decimal]) -> Optional[Decimal]:
    if not values:
        return None
    return (sum(values, Decimal(0)) / len(values)).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class MonthlyPayroll:
    month: date
    rows: Sequence[PayrollRow]


class ReportService:
    def __init__(self, reports: ReportRepository):
        self._reports = reports

    def department_summary(self, *, today: Optional[date] = None) -> list[DepartmentSummary]:
        """Employee count and current-salary statistics per department.

        Employees without a current salary are counted but left out of the
        average/min/max, which stay None when nobody has one. Employees with
        no department form a final group whose code is None.
        """
        rows = self._reports.current_salary_rows(today=today or datetime_utils.today())

        summary_map: dict[Optional[str], dict] = {}
        for r in rows:
            s = summary_map.get(r.department_code)
            if not s:
                s = {
                    "department_code": r.department_code,
                    "department_name": r.department_name,
                    "base_salary": r.base_salary,
                    "employee_count": 0,
                    "amounts": [],
                }
                summary_map[r.department_code] = s
            if r.employee_id is None:
                continue
            s["employee_count"] += 1
            if r.amount is not None:
                s["amounts"].append(r.amount)

        summary = []
        for s in summary_map.values():
            amounts = s["amounts"]
            summary.append(
                DepartmentSummary(
                    department_code=s["department_code"],
                    department_name=s["department_name"],
                    base_salary=s["base_salary"],
                    employee_count=s["employee_count"],
                    average_salary=_average(amounts),
                    min_salary=min(amounts) if amounts else None,
                    max_salary=max(amounts) if amounts else None,
                )
            )

        # Employees without a department sort last.
        summary.sort(key=lambda x: (x.department_code is None, x.department_code or ""))
        return summary

    def monthly_payroll(self, month: Optional[str]) -> MonthlyPayroll:
        start, end = month_bounds(parse_month(month))
        rows = self._reports.monthly_payroll_rows(month_start=start, month_end=end)
        return MonthlyPayroll(month=start, rows=list(rows))

    def department_payroll(self, month: Optional[str]) -> list[DepartmentPayroll]:
        """The monthly payroll grouped by department, with averages."""
        return summarize_payroll(self.monthly_payroll(month).rows)


def summarize_payroll(rows: Iterable[PayrollRow]) -> list[DepartmentPayroll]:
    groups: dict[Optional[str], list[PayrollRow]] = {}
    for r in rows:
        groups.setdefault(r.department_code, []).append(r)

    out = []
    for code, members in groups.items():
        first = members[0]
        out.append(
            DepartmentPayroll(
                department_code=code,
                department_name=first.department_name,
                employee_count=len(members),
                base_salary=first.base_salary,
                average_gross_salary=_average([m.gross_salary for m in members]),
                average_deduction=_average([m.deduction for m in members]),
                average_net_salary=_average([m.net_salary for m in members]),
            )
        )

    # Employees without a department sort last.
    out.sort(key=lambda d: (d.department_code is None, d.department_code or ""))
    return out
