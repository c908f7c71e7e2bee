from __future__ import annotations

from decimal import Decimal

import pytest

from employee_management.core.exceptions import ConflictError, NotFoundError, ValidationError
from employee_management.departments.service import DepartmentService
from employee_management.employees.model import EmployeeData

from fakes import InMemoryDatabase, InMemoryDepartments, InMemoryEmployees


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def service(db):
    return DepartmentService(InMemoryDepartments(db))


def test_create_defaults_gross_salary_to_zero(service):
    code = service.create_department(code="ENG", name="Engineering")

    department = service.get_department(code)
    assert department.gross_salary == Decimal("0.00")
    assert department.employee_count == 0


def test_create_requires_code_and_name(service):
    with pytest.raises(ValidationError):
        service.create_department(code="", name="Engineering")
    with pytest.raises(ValidationError):
        service.create_department(code="ENG", name=" ")


def test_create_rejects_negative_gross(service):
    with pytest.raises(ValidationError):
        service.create_department(code="ENG", name="Engineering", gross_salary="-1")


def test_create_duplicate_code_conflicts(service):
    service.create_department(code="ENG", name="Engineering")

    with pytest.raises(ConflictError):
        service.create_department(code="ENG", name="Again")


def test_update_and_missing(service):
    service.create_department(code="HR", name="HR", gross_salary="3000")

    service.update_department("HR", name="Human Resources", gross_salary="3500.5")

    department = service.get_department("HR")
    assert department.department_name == "Human Resources"
    assert department.gross_salary == Decimal("3500.50")
    with pytest.raises(NotFoundError):
        service.update_department("NOPE", name="x")


def test_delete_with_employees_conflicts(db, service):
    service.create_department(code="ENG", name="Engineering")
    InMemoryEmployees(db).create(EmployeeData(first_name="A", last_name="B", email="a@x.com", department="ENG"))

    with pytest.raises(ConflictError, match="employees assigned"):
        service.delete_department("ENG")
    assert service.get_department("ENG").employee_count == 1


def test_delete_empty_department_succeeds(service):
    service.create_department(code="FIN", name="Finance")

    service.delete_department("FIN")

    with pytest.raises(NotFoundError):
        service.get_department("FIN")


def test_list_is_ordered_by_code(service):
    service.create_department(code="HR", name="Human Resources")
    service.create_department(code="ENG", name="Engineering")

    assert [d.department_code for d in service.list_departments()] == ["ENG", "HR"]
