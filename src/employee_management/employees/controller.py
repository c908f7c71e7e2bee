from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, login_required
from ..core.constants import API_PREFIX
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route(f"{API_PREFIX}/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        return jsonify([e.to_dict() for e in service.list_employees()])

    @app.route(f"{API_PREFIX}/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @login_required
    def get_employee(employee_id: int):
        return jsonify(service.get_employee(employee_id).to_dict())

    @app.route(f"{API_PREFIX}/employees", methods=["POST"], endpoint="create_employee")
    @login_required
    def create_employee():
        employee_id = service.create_employee(json_body())
        return jsonify({"message": "Employee created successfully", "employeeId": employee_id}), 201

    @app.route(f"{API_PREFIX}/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @login_required
    def update_employee(employee_id: int):
        service.update_employee(employee_id, json_body())
        return jsonify({"message": "Employee updated successfully"})

    @app.route(f"{API_PREFIX}/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @login_required
    def delete_employee(employee_id: int):
        service.delete_employee(employee_id)
        return jsonify({"message": "Employee deleted successfully"})
