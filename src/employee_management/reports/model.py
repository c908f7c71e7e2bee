from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


def _money(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


@dataclass(frozen=True)
class CurrentSalaryRow:
    """Read-model: one employee (or an empty department) with its current salary."""

    department_code: Optional[str]
    department_name: Optional[str]
    base_salary: Optional[Decimal]
    employee_id: Optional[int]
    amount: Optional[Decimal]


@dataclass(frozen=True)
class PayrollRow:
    """Read-model: one employee's pay for a month, as computed by the query."""

    employee_id: int
    first_name: str
    last_name: str
    position: Optional[str]
    department_code: Optional[str]
    department_name: Optional[str]
    base_salary: Optional[Decimal]
    gross_salary: Decimal
    deduction: Decimal
    net_salary: Decimal

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "position": self.position,
            "department_code": self.department_code,
            "department_name": self.department_name,
            "gross_salary": _money(self.gross_salary),
            "deduction": _money(self.deduction),
            "net_salary": _money(self.net_salary),
        }


@dataclass(frozen=True)
class DepartmentSummary:
    department_code: Optional[str]
    department_name: Optional[str]
    base_salary: Optional[Decimal]
    employee_count: int
    average_salary: Optional[Decimal]
    min_salary: Optional[Decimal]
    max_salary: Optional[Decimal]

    def to_dict(self) -> dict:
        return {
            "department_code": self.department_code,
            "department_name": self.department_name,
            "base_salary": _money(self.base_salary),
            "employee_count": self.employee_count,
            "average_salary": _money(self.average_salary),
            "min_salary": _money(self.min_salary),
            "max_salary": _money(self.max_salary),
        }


@dataclass(frozen=True)
class DepartmentPayroll:
    department_code: Optional[str]
    department_name: Optional[str]
    employee_count: int
    base_salary: Optional[Decimal]
    average_gross_salary: Decimal
    average_deduction: Decimal
    average_net_salary: Decimal

    def to_dict(self) -> dict:
        return {
            "department_code": self.department_code,
            "department_name": self.department_name,
            "employee_count": self.employee_count,
            "base_salary": _money(self.base_salary),
            "average_gross_salary": _money(self.average_gross_salary),
            "average_deduction": _money(self.average_deduction),
            "average_net_salary": _money(self.average_net_salary),
        }
