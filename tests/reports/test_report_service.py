from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from employee_management.core.exceptions import ValidationError
from employee_management.reports.model import CurrentSalaryRow, PayrollRow
from employee_management.reports.service import ReportService, summarize_payroll

from fakes import build_memory_container


class RecordingReportRepo:
    def __init__(self, current_rows=(), payroll_rows=()):
        self.current_rows = list(current_rows)
        self.payroll_rows = list(payroll_rows)
        self.calls = []

    def current_salary_rows(self, *, today):
        self.calls.append(("current", today))
        return self.current_rows

    def monthly_payroll_rows(self, *, month_start, month_end):
        self.calls.append(("payroll", month_start, month_end))
        return self.payroll_rows


def payroll_row(employee_id, code, gross, deduction="0"):
    gross, deduction = Decimal(gross), Decimal(deduction)
    return PayrollRow(
        employee_id=employee_id,
        first_name="F",
        last_name="L",
        position=None,
        department_code=code,
        department_name=f"{code} dept" if code else None,
        base_salary=Decimal("1000") if code else None,
        gross_salary=gross,
        deduction=deduction,
        net_salary=gross - deduction,
    )


def test_department_summary_aggregates_current_salaries():
    repo = RecordingReportRepo(
        current_rows=[
            CurrentSalaryRow("ENG", "Engineering", Decimal("5000"), 1, Decimal("50000")),
            CurrentSalaryRow("ENG", "Engineering", Decimal("5000"), 2, Decimal("70000")),
            CurrentSalaryRow("ENG", "Engineering", Decimal("5000"), 3, None),
            CurrentSalaryRow("FIN", "Finance", Decimal("0"), None, None),
        ]
    )

    eng, fin = ReportService(repo).department_summary(today=date(2024, 1, 1))

    assert repo.calls == [("current", date(2024, 1, 1))]
    assert eng.employee_count == 3
    assert eng.average_salary == Decimal("60000.00")
    assert (eng.min_salary, eng.max_salary) == (Decimal("50000"), Decimal("70000"))
    assert fin.employee_count == 0
    assert fin.to_dict()["average_salary"] is None
    assert fin.to_dict()["min_salary"] is None


def test_department_summary_defaults_to_today(fixed_today):
    repo = RecordingReportRepo()

    assert ReportService(repo).department_summary() == []
    assert repo.calls == [("current", fixed_today)]


def test_monthly_payroll_passes_month_bounds():
    repo = RecordingReportRepo(payroll_rows=[payroll_row(1, "ENG", "3000", "250")])

    report = ReportService(repo).monthly_payroll("2024-02-01")

    assert report.month == date(2024, 2, 1)
    assert repo.calls == [("payroll", date(2024, 2, 1), date(2024, 2, 29))]
    assert report.rows[0].to_dict()["net_salary"] == 2750.0


def test_monthly_payroll_blank_month_is_current(fixed_today):
    repo = RecordingReportRepo()

    assert ReportService(repo).monthly_payroll(None).month == date(2024, 6, 1)
    assert repo.calls == [("payroll", date(2024, 6, 1), date(2024, 6, 30))]


def test_monthly_payroll_rejects_garbage_month():
    with pytest.raises(ValidationError):
        ReportService(RecordingReportRepo()).monthly_payroll("June")


def test_summarize_payroll_groups_and_sorts_unassigned_last():
    rows = [
        payroll_row(1, None, "1000"),
        payroll_row(2, "HR", "3000", "100"),
        payroll_row(3, "ENG", "4000", "300"),
        payroll_row(4, "ENG", "5000", "0"),
    ]

    groups = summarize_payroll(rows)

    assert [g.department_code for g in groups] == ["ENG", "HR", None]
    eng = groups[0]
    assert eng.employee_count == 2
    assert eng.average_gross_salary == Decimal("4500.00")
    assert eng.average_deduction == Decimal("150.00")
    assert eng.average_net_salary == Decimal("4350.00")


def test_monthly_payroll_over_memory_store(memory_db):
    c = build_memory_container(memory_db)
    c.department_service.create_department(code="ENG", name="Engineering", gross_salary="4000")
    ann = c.employee_service.create_employee(
        {"firstName": "Ann", "lastName": "Lee", "email": "ann@x.com", "department": "ENG"}
    )
    bob = c.employee_service.create_employee(
        {"firstName": "Bob", "lastName": "Ng", "email": "bob@x.com", "department": "ENG"}
    )
    c.salary_service.create_salary({"employeeId": ann, "amount": "5000", "effectiveDate": "2024-01-01"})
    c.deduction_service.create_deduction({"employeeId": ann, "payMonth": "2024-03", "amount": "500"})

    rows = {r.employee_id: r for r in c.report_service.monthly_payroll("2024-03").rows}

    assert rows[ann].gross_salary == Decimal("5000.00")
    assert rows[ann].net_salary == Decimal("4500.00")
    assert rows[bob].gross_salary == Decimal("4000.00")
    assert rows[bob].deduction == Decimal("0.00")


def test_department_summary_puts_unassigned_group_last():
    repo = RecordingReportRepo(
        current_rows=[
            CurrentSalaryRow(None, None, None, 9, Decimal("1000")),
            CurrentSalaryRow("HR", "Human Resources", Decimal("0"), 1, None),
        ]
    )

    hr, unassigned = ReportService(repo).department_summary(today=date(2024, 1, 1))

    assert hr.department_code == "HR"
    assert unassigned.department_code is None
    assert unassigned.employee_count == 1
    assert unassigned.to_dict()["base_salary"] is None
    assert unassigned.average_salary == Decimal("1000.00")
