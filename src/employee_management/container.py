from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .deductions.mysql_deduction_repository import MySQLDeductionRepository
from .deductions.repository import DeductionRepository
from .deductions.service import DeductionService
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.repository import ReportRepository
from .reports.service import ReportService
from .salaries.mysql_salary_repository import MySQLSalaryRepository
from .salaries.repository import SalaryRepository
from .salaries.service import SalaryService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: UserRepository
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    salaries_repo: SalaryRepository
    deductions_repo: DeductionRepository
    reports_repo: ReportRepository

    auth_service: AuthService
    department_service: DepartmentService
    employee_service: EmployeeService
    salary_service: SalaryService
    deduction_service: DeductionService
    report_service: ReportService


def wire_services(
    *,
    conn,
    users_repo: UserRepository,
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    salaries_repo: SalaryRepository,
    deductions_repo: DeductionRepository,
    reports_repo: ReportRepository,
) -> Container:
    """Build services on top of any repository implementations."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        salaries_repo=salaries_repo,
        deductions_repo=deductions_repo,
        reports_repo=reports_repo,
        auth_service=AuthService(users_repo),
        department_service=DepartmentService(departments_repo),
        employee_service=EmployeeService(employees_repo, departments_repo),
        salary_service=SalaryService(salaries_repo, employees_repo),
        deduction_service=DeductionService(deductions_repo, employees_repo),
        report_service=ReportService(reports_repo),
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
    )
    conn = DatabaseConnection(config)

    return wire_services(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        salaries_repo=MySQLSalaryRepository(conn),
        deductions_repo=MySQLDeductionRepository(conn),
        reports_repo=MySQLReportRepository(conn),
    )
