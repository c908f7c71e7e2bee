from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from employee_management.core.exceptions import ConflictError, NotFoundError, ValidationError
from employee_management.employees.service import EmployeeService
from employee_management.salaries.model import SalaryData

from fakes import InMemoryDatabase, InMemoryDepartments, InMemoryEmployees, InMemorySalaries


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def departments(db):
    repo = InMemoryDepartments(db)
    repo.create(code="ENG", name="Engineering", gross_salary=Decimal("5000.00"))
    return repo


@pytest.fixture
def service(db, departments):
    return EmployeeService(InMemoryEmployees(db), departments)


def ann(**overrides):
    fields = {"firstName": "Ann", "lastName": "Lee", "email": "a@x.com"}
    fields.update(overrides)
    return fields


def test_create_and_get(service):
    employee_id = service.create_employee(ann(phone=" 555 ", department="ENG", hireDate="2024-02-01"))

    employee = service.get_employee(employee_id)
    assert employee.first_name == "Ann"
    assert employee.phone == "555"
    assert employee.department == "ENG"
    assert employee.hire_date == date(2024, 2, 1)


@pytest.mark.parametrize("missing", ["firstName", "lastName", "email"])
def test_create_requires_name_and_email(service, missing):
    with pytest.raises(ValidationError):
        service.create_employee(ann(**{missing: None}))


def test_create_rejects_duplicate_email(service):
    service.create_employee(ann())

    with pytest.raises(ConflictError):
        service.create_employee(ann(firstName="Other"))


def test_create_rejects_unknown_department(service):
    with pytest.raises(ValidationError):
        service.create_employee(ann(department="NOPE"))


def test_create_rejects_malformed_hire_date(service):
    with pytest.raises(ValidationError):
        service.create_employee(ann(hireDate="01/02/2024"))


def test_list_is_ordered_by_last_then_first_name(service):
    service.create_employee({"firstName": "Zoe", "lastName": "Adams", "email": "z@x.com"})
    service.create_employee({"firstName": "Bob", "lastName": "Lee", "email": "b@x.com"})
    service.create_employee({"firstName": "Al", "lastName": "Lee", "email": "al@x.com"})

    names = [(e.last_name, e.first_name) for e in service.list_employees()]
    assert names == [("Adams", "Zoe"), ("Lee", "Al"), ("Lee", "Bob")]


def test_update_keeps_own_email(service):
    employee_id = service.create_employee(ann())

    service.update_employee(employee_id, ann(position="Engineer"))

    assert service.get_employee(employee_id).position == "Engineer"


def test_update_rejects_email_of_another_employee(service):
    service.create_employee(ann())
    other_id = service.create_employee(ann(email="b@x.com"))

    with pytest.raises(ConflictError):
        service.update_employee(other_id, ann())


def test_update_unknown_employee_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_employee(404, ann())


def test_get_unknown_employee_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.get_employee(404)


def test_delete_is_idempotent(service):
    employee_id = service.create_employee(ann())

    service.delete_employee(employee_id)
    service.delete_employee(employee_id)

    with pytest.raises(NotFoundError):
        service.get_employee(employee_id)


def test_delete_cascades_salaries(db, service):
    salaries = InMemorySalaries(db)
    employee_id = service.create_employee(ann())
    salaries.create(employee_id, SalaryData(amount=Decimal("50000.00"), effective_date=date(2024, 1, 1)))

    service.delete_employee(employee_id)

    assert salaries.list_for_employee(employee_id) == []
