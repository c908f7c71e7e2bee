from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_str, require_fields
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..departments.repository import DepartmentRepository
from .model import Employee, EmployeeData
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("firstName", "lastName", "email")


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, departments: DepartmentRepository):
        self._employees = employees
        self._departments = departments

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create_employee(self, fields: Mapping[str, Any]) -> int:
        data = self._validate(fields)
        if self._employees.email_taken(data.email):
            raise ConflictError("Email already exists")

        employee_id = self._employees.create(data)
        logger.info("Created employee %s (id=%s)", data.email, employee_id)
        return employee_id

    def update_employee(self, employee_id: int, fields: Mapping[str, Any]) -> None:
        data = self._validate(fields)
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        if self._employees.email_taken(data.email, exclude_id=employee_id):
            raise ConflictError("Email already exists")

        self._employees.update(employee_id, data)

    def delete_employee(self, employee_id: int) -> None:
        # Deleting an unknown id is not an error.
        if self._employees.delete(employee_id):
            logger.info("Deleted employee id=%s", employee_id)

    def _validate(self, fields: Mapping[str, Any]) -> EmployeeData:
        require_fields(fields, REQUIRED_FIELDS, "First name, last name, and email are required")

        hire_date_s = optional_str(fields.get("hireDate"))
        department = optional_str(fields.get("department"))
        if department and not self._departments.get_by_code(department):
            raise ValidationError("Department does not exist")

        return EmployeeData(
            first_name=str(fields["firstName"]).strip(),
            last_name=str(fields["lastName"]).strip(),
            email=str(fields["email"]).strip(),
            phone=optional_str(fields.get("phone")),
            address=optional_str(fields.get("address")),
            position=optional_str(fields.get("position")),
            department=department,
            hire_date=parse_iso_date(hire_date_s, "Hire date") if hire_date_s else None,
        )
