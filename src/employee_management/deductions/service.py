from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import parse_month
from ..common.validators import optional_str, parse_amount, parse_id, require_fields
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import Deduction
from .repository import DeductionRepository

logger = logging.getLogger(__name__)


class DeductionService:
    def __init__(self, deductions: DeductionRepository, employees: EmployeeRepository):
        self._deductions = deductions
        self._employees = employees

    def list_for_employee(self, employee_id: int) -> Sequence[Deduction]:
        return self._deductions.list_for_employee(employee_id)

    def create_deduction(self, fields: Mapping[str, Any]) -> int:
        require_fields(
            fields,
            ("employeeId", "payMonth", "amount"),
            "Employee ID, pay month, and amount are required",
        )
        employee_id = parse_id(fields["employeeId"], "Employee ID")
        pay_month = parse_month(fields["payMonth"])
        amount = parse_amount(fields["amount"], "Amount")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        deduction_id = self._deductions.create(
            employee_id=employee_id,
            pay_month=pay_month,
            amount=amount,
            description=optional_str(fields.get("description")),
        )
        logger.info("Created deduction id=%s for employee id=%s (%s)", deduction_id, employee_id, pay_month)
        return deduction_id

    def delete_deduction(self, deduction_id: int) -> None:
        if self._deductions.delete(deduction_id):
            logger.info("Deleted deduction id=%s", deduction_id)
