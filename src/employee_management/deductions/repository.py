from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Deduction


class DeductionRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[Deduction]:
        raise NotImplementedError

    def create(self, *, employee_id: int, pay_month: date, amount: Decimal, description: Optional[str]) -> int:
        raise NotImplementedError

    def delete(self, deduction_id: int) -> bool:
        raise NotImplementedError
