from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import login_required
from ..core.constants import API_PREFIX
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    @app.route(f"{API_PREFIX}/reports/departments", methods=["GET"], endpoint="report_departments")
    @login_required
    def report_departments():
        return jsonify([d.to_dict() for d in service.department_summary()])

    @app.route(f"{API_PREFIX}/reports/monthly-payroll", methods=["GET"], endpoint="report_monthly_payroll")
    @login_required
    def report_monthly_payroll():
        report = service.monthly_payroll(request.args.get("month"))
        return jsonify([r.to_dict() for r in report.rows])

    @app.route(f"{API_PREFIX}/reports/department-payroll", methods=["GET"], endpoint="report_department_payroll")
    @login_required
    def report_department_payroll():
        return jsonify([d.to_dict() for d in service.department_payroll(request.args.get("month"))])
