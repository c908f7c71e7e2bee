from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, login_required
from ..core.constants import API_PREFIX
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.deduction_service

    @app.route(
        f"{API_PREFIX}/employees/<int:employee_id>/deductions",
        methods=["GET"],
        endpoint="employee_deductions",
    )
    @login_required
    def employee_deductions(employee_id: int):
        return jsonify([d.to_dict() for d in service.list_for_employee(employee_id)])

    @app.route(f"{API_PREFIX}/deductions", methods=["POST"], endpoint="create_deduction")
    @login_required
    def create_deduction():
        deduction_id = service.create_deduction(json_body())
        return jsonify({"message": "Deduction created successfully", "deductionId": deduction_id}), 201

    @app.route(f"{API_PREFIX}/deductions/<int:deduction_id>", methods=["DELETE"], endpoint="delete_deduction")
    @login_required
    def delete_deduction(deduction_id: int):
        service.delete_deduction(deduction_id)
        return jsonify({"message": "Deduction deleted successfully"})
