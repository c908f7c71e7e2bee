from __future__ import annotations

from datetime import date
from decimal import Decimal

import mysql.connector
import pytest

from employee_management.core.exceptions import ConflictError, NotFoundError, ValidationError
from employee_management.database.connection import DatabaseConnection, DBConfig
from employee_management.deductions.mysql_deduction_repository import MySQLDeductionRepository
from employee_management.departments.mysql_department_repository import MySQLDepartmentRepository
from employee_management.employees.model import EmployeeData
from employee_management.employees.mysql_employee_repository import MySQLEmployeeRepository
from employee_management.salaries.model import SalaryData
from employee_management.salaries.mysql_salary_repository import MySQLSalaryRepository
from employee_management.users.mysql_user_repository import MySQLUserRepository

from fake_mysql import install_fake_pool

DUP_ENTRY = 1062
ROW_IS_REFERENCED = 1451
NO_REFERENCED_ROW = 1452

EMPLOYEE = EmployeeData(first_name="Ann", last_name="Lee", email="ann@x.com", department="ENG")
SALARY = SalaryData(amount=Decimal("50000.00"), effective_date=date(2024, 1, 1))


def create_user(conn):
    MySQLUserRepository(conn).create_user(
        username="ann", password_hash="h", first_name="Ann", last_name="Lee", email="ann@x.com"
    )


def create_department(conn):
    MySQLDepartmentRepository(conn).create(code="ENG", name="Engineering", gross_salary=Decimal("0"))


def delete_department(conn):
    MySQLDepartmentRepository(conn).delete("ENG")


def create_employee(conn):
    MySQLEmployeeRepository(conn).create(EMPLOYEE)


def update_employee(conn):
    MySQLEmployeeRepository(conn).update(1, EMPLOYEE)


def create_salary(conn):
    MySQLSalaryRepository(conn).create(1, SALARY)


def create_deduction(conn):
    MySQLDeductionRepository(conn).create(
        employee_id=1, pay_month=date(2024, 1, 1), amount=Decimal("10"), description=None
    )


@pytest.fixture
def pools(monkeypatch):
    return install_fake_pool(monkeypatch)


@pytest.fixture
def conn(pools):
    c = DatabaseConnection(DBConfig(host="db", port=3306, user="u", password="p", database="em", pool_size=1))
    c.open()
    return c


def fail_with(pools, errno):
    pools[0].fail_with = mysql.connector.IntegrityError(msg="integrity", errno=errno)


@pytest.mark.parametrize(
    "operation, errno, expected",
    [
        (create_user, DUP_ENTRY, ConflictError),
        (create_department, DUP_ENTRY, ConflictError),
        (delete_department, ROW_IS_REFERENCED, ConflictError),
        (create_employee, DUP_ENTRY, ConflictError),
        (update_employee, DUP_ENTRY, ConflictError),
        (create_employee, NO_REFERENCED_ROW, ValidationError),
        (create_salary, NO_REFERENCED_ROW, NotFoundError),
        (create_deduction, NO_REFERENCED_ROW, NotFoundError),
    ],
)
def test_integrity_errors_become_domain_errors(conn, pools, operation, errno, expected):
    fail_with(pools, errno)

    with pytest.raises(expected) as excinfo:
        operation(conn)

    assert excinfo.value.__cause__.errno == errno
    [c] = pools[0].connections
    assert (c.commits, c.rollbacks, c.closes) == (0, 1, 1)


def test_department_in_use_message(conn, pools):
    fail_with(pools, ROW_IS_REFERENCED)

    with pytest.raises(ConflictError, match="employees assigned"):
        delete_department(conn)


def test_unrelated_integrity_error_propagates(conn, pools):
    fail_with(pools, 1048)

    with pytest.raises(mysql.connector.IntegrityError):
        create_salary(conn)


def test_successful_insert_commits_and_returns_id(conn, pools):
    assert MySQLSalaryRepository(conn).create(1, SALARY) == 7

    [c] = pools[0].connections
    assert (c.commits, c.rollbacks, c.closes) == (1, 0, 1)
    assert c.executed[0][1] == (1, Decimal("50000.00"), date(2024, 1, 1), None)
