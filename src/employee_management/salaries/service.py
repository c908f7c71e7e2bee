from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common import datetime_utils
from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_str, parse_amount, parse_id, require_fields
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Salary, SalaryData
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


def pick_current(salaries: Iterable[Salary], on: date) -> Optional[Salary]:
    """Latest effective row whose end_date is open or after ``on``."""
    candidates = [s for s in salaries if s.is_current(on)]
    if not candidates:
        return None
    return max(candidates, key=lambda s: (s.effective_date, s.id))


class SalaryService:
    def __init__(self, salaries: SalaryRepository, employees: EmployeeRepository):
        self._salaries = salaries
        self._employees = employees

    def list_salaries(self) -> Sequence[Salary]:
        return self._salaries.list_all()

    def list_for_employee(self, employee_id: int) -> Sequence[Salary]:
        return self._salaries.list_for_employee(employee_id)

    def current_for_employee(self, employee_id: int, *, on: Optional[date] = None) -> Salary:
        current = pick_current(self._salaries.list_for_employee(employee_id), on or datetime_utils.today())
        if not current:
            raise NotFoundError("No current salary for this employee")
        return current

    def create_salary(self, fields: Mapping[str, Any]) -> int:
        require_fields(
            fields,
            ("employeeId", "amount", "effectiveDate"),
            "Employee ID, amount, and effective date are required",
        )
        employee_id = parse_id(fields["employeeId"], "Employee ID")
        data = self._parse(fields)

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        salary_id = self._salaries.create(employee_id, data)
        logger.info("Created salary id=%s for employee id=%s", salary_id, employee_id)
        return salary_id

    def update_salary(self, salary_id: int, fields: Mapping[str, Any]) -> None:
        require_fields(fields, ("amount", "effectiveDate"), "Amount and effective date are required")
        data = self._parse(fields)

        # An unknown id updates nothing and is still reported as success.
        if not self._salaries.update(salary_id, data):
            logger.debug("Salary update matched no row (id=%s)", salary_id)

    def delete_salary(self, salary_id: int) -> None:
        if self._salaries.delete(salary_id):
            logger.info("Deleted salary id=%s", salary_id)

    @staticmethod
    def _parse(fields: Mapping[str, Any]) -> SalaryData:
        amount = parse_amount(fields["amount"], "Amount")
        effective_date = parse_iso_date(fields["effectiveDate"], "Effective date")
        end_date_s = optional_str(fields.get("endDate"))
        end_date = parse_iso_date(end_date_s, "End date") if end_date_s else None

        if end_date and end_date < effective_date:
            raise ValidationError("End date cannot be before effective date")
        return SalaryData(amount=amount, effective_date=effective_date, end_date=end_date)
