from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[Department]:
        raise NotImplementedError

    def create(self, *, code: str, name: str, gross_salary: Decimal) -> None:
        """Raises ConflictError when the code already exists."""

        raise NotImplementedError

    def update(self, *, code: str, name: str, gross_salary: Decimal) -> None:
        raise NotImplementedError

    def count_employees(self, code: str) -> int:
        raise NotImplementedError

    def delete(self, code: str) -> bool:
        """Raises ConflictError when employees still reference the department."""

        raise NotImplementedError
