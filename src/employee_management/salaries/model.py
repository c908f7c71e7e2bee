from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class SalaryData:
    amount: Decimal
    effective_date: date
    end_date: Optional[date] = None


@dataclass(frozen=True)
class Salary:
    """One row of an employee's salary history.

    ``end_date`` None means open-ended. The employee name is only filled by
    the cross-employee listing.
    """

    id: int
    employee_id: int
    amount: Decimal
    effective_date: date
    end_date: Optional[date]
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def is_current(self, on: date) -> bool:
        return self.end_date is None or self.end_date > on

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "employee_id": self.employee_id,
            "amount": float(self.amount),
            "effective_date": self.effective_date.isoformat(),
            "end_date": self.end_date.isoformat() if self.end_date else None,
        }
        if self.first_name is not None:
            out["first_name"] = self.first_name
            out["last_name"] = self.last_name
        return out
