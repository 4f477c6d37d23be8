from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.http import api_view, year_month_args
from ..container import Container
from .service import ALL_LEVELS


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @api_view
    def dashboard():
        year, month = year_month_args()
        summary = container.payroll_service.dashboard(year=year, month=month, today=today_local())
        return jsonify({"success": True, "data": summary.to_dict()})

    @app.route("/api/employee-status", methods=["GET"], endpoint="employee_status")
    @api_view
    def employee_status():
        year, month = year_month_args()
        rows = container.payroll_service.employee_status(
            year=year,
            month=month,
            search=request.args.get("search", ""),
            level=request.args.get("level", ALL_LEVELS),
            sort_by=request.args.get("sort", "packets"),
        )
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})
