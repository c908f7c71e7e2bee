from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, login_required
from ..core.constants import API_PREFIX
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.salary_service

    @app.route(f"{API_PREFIX}/salaries", methods=["GET"], endpoint="list_salaries")
    @login_required
    def list_salaries():
        return jsonify([s.to_dict() for s in service.list_salaries()])

    @app.route(f"{API_PREFIX}/employees/<int:employee_id>/salaries", methods=["GET"], endpoint="employee_salaries")
    @login_required
    def employee_salaries(employee_id: int):
        return jsonify([s.to_dict() for s in service.list_for_employee(employee_id)])

    @app.route(
        f"{API_PREFIX}/employees/<int:employee_id>/salaries/current",
        methods=["GET"],
        endpoint="employee_current_salary",
    )
    @login_required
    def employee_current_salary(employee_id: int):
        return jsonify(service.current_for_employee(employee_id).to_dict())

    @app.route(f"{API_PREFIX}/salaries", methods=["POST"], endpoint="create_salary")
    @login_required
    def create_salary():
        salary_id = service.create_salary(json_body())
        return jsonify({"message": "Salary created successfully", "salaryId": salary_id}), 201

    @app.route(f"{API_PREFIX}/salaries/<int:salary_id>", methods=["PUT"], endpoint="update_salary")
    @login_required
    def update_salary(salary_id: int):
        service.update_salary(salary_id, json_body())
        return jsonify({"message": "Salary updated successfully"})

    @app.route(f"{API_PREFIX}/salaries/<int:salary_id>", methods=["DELETE"], endpoint="delete_salary")
    @login_required
    def delete_salary(salary_id: int):
        service.delete_salary(salary_id)
        return jsonify({"message": "Salary deleted successfully"})
