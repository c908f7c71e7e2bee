from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Sequence

from ..common.validators import is_blank, parse_amount, require_non_empty
from ..core.exceptions import ConflictError, NotFoundError
from .model import DEPARTMENT_IN_USE, Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get_department(self, code: str) -> Department:
        department = self._departments.get_by_code(code)
        if not department:
            raise NotFoundError("Department not found")
        return department

    def create_department(self, *, code: Any, name: Any, gross_salary: Any = None) -> str:
        code = require_non_empty(code, "Department code")
        name = require_non_empty(name, "Department name")
        amount = self._parse_gross(gross_salary)

        if self._departments.get_by_code(code):
            raise ConflictError("Department code already exists")

        self._departments.create(code=code, name=name, gross_salary=amount)
        logger.info("Created department %s", code)
        return code

    def update_department(self, code: str, *, name: Any, gross_salary: Any = None) -> None:
        name = require_non_empty(name, "Department name")
        amount = self._parse_gross(gross_salary)

        if not self._departments.get_by_code(code):
            raise NotFoundError("Department not found")
        self._departments.update(code=code, name=name, gross_salary=amount)

    def delete_department(self, code: str) -> None:
        if self._departments.count_employees(code) > 0:
            raise ConflictError(DEPARTMENT_IN_USE)
        if self._departments.delete(code):
            logger.info("Deleted department %s", code)

    @staticmethod
    def _parse_gross(value: Any) -> Decimal:
        if is_blank(value):
            return Decimal("0.00")
        return parse_amount(value, "Gross salary", allow_zero=True)
