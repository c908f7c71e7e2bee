from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

DEPARTMENT_IN_USE = "Cannot delete department that has employees assigned to it"


@dataclass(frozen=True)
class Department:
    department_code: str
    department_name: str
    gross_salary: Decimal
    employee_count: int = 0

    def to_dict(self) -> dict:
        return {
            "department_code": self.department_code,
            "department_name": self.department_name,
            "gross_salary": float(self.gross_salary),
            "employee_count": self.employee_count,
        }
