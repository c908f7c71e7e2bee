from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, login_required
from ..core.constants import API_PREFIX
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route(f"{API_PREFIX}/departments", methods=["GET"], endpoint="list_departments")
    @login_required
    def list_departments():
        return jsonify([d.to_dict() for d in service.list_departments()])

    @app.route(f"{API_PREFIX}/departments/<code>", methods=["GET"], endpoint="get_department")
    @login_required
    def get_department(code: str):
        return jsonify(service.get_department(code).to_dict())

    @app.route(f"{API_PREFIX}/departments", methods=["POST"], endpoint="create_department")
    @login_required
    def create_department():
        data = json_body()
        code = service.create_department(
            code=data.get("departmentCode"),
            name=data.get("departmentName"),
            gross_salary=data.get("grossSalary"),
        )
        return jsonify({"message": "Department created successfully", "departmentCode": code}), 201

    @app.route(f"{API_PREFIX}/departments/<code>", methods=["PUT"], endpoint="update_department")
    @login_required
    def update_department(code: str):
        data = json_body()
        service.update_department(code, name=data.get("departmentName"), gross_salary=data.get("grossSalary"))
        return jsonify({"message": "Department updated successfully"})

    @app.route(f"{API_PREFIX}/departments/<code>", methods=["DELETE"], endpoint="delete_department")
    @login_required
    def delete_department(code: str):
        service.delete_department(code)
        return jsonify({"message": "Department deleted successfully"})
