from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Deduction:
    """An amount withheld from one employee's pay for one month."""

    id: int
    employee_id: int
    pay_month: date
    amount: Decimal
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "pay_month": self.pay_month.isoformat(),
            "amount": float(self.amount),
            "description": self.description,
        }
