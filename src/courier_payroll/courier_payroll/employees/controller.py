from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.http import api_view, json_body
from ..container import Container


def _employee_dict(emp) -> dict:
    return {
        "id": emp.employee_id,
        "name": emp.name,
        "email": emp.email,
        "phone": emp.phone,
        "join_date": emp.join_date.isoformat() if emp.join_date else None,
        "status": emp.status.value,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_view
    def list_employees():
        employees = container.employee_service.list_all()
        return jsonify({"success": True, "data": [_employee_dict(e) for e in employees]})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @api_view
    def add_employee():
        data = json_body()
        join_date = parse_iso_date(data["join_date"]) if data.get("join_date") else None
        employee_id = container.employee_service.create_employee(
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone"),
            join_date=join_date,
        )
        return jsonify({"success": True, "id": employee_id}), 201

    @app.route("/api/employees/<int:employee_id>/status", methods=["POST"], endpoint="set_employee_status")
    @api_view
    def set_employee_status(employee_id: int):
        data = json_body()
        container.employee_service.set_status(employee_id=employee_id, status=data.get("status", ""))
        return jsonify({"success": True})
