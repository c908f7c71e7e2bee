from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeData


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by last name, then first name."""

        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def email_taken(self, email: str, *, exclude_id: Optional[int] = None) -> bool:
        raise NotImplementedError

    def create(self, data: EmployeeData) -> int:
        """Raises ConflictError on a duplicate email."""

        raise NotImplementedError

    def update(self, employee_id: int, data: EmployeeData) -> None:
        raise NotImplementedError

    def delete(self, employee_id: int) -> bool:
        """Delete an employee; salaries and deductions go with it."""

        raise NotImplementedError
