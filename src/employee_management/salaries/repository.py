from __future__ import annotations

from typing import Protocol, Sequence

from .model import Salary, SalaryData


class SalaryRepository(Protocol):
    def list_all(self) -> Sequence[Salary]:
        """All rows with employee names, newest effective_date first."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Salary]:
        raise NotImplementedError

    def create(self, employee_id: int, data: SalaryData) -> int:
        raise NotImplementedError

    def update(self, salary_id: int, data: SalaryData) -> bool:
        raise NotImplementedError

    def delete(self, salary_id: int) -> bool:
        raise NotImplementedError
