from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.http import api_view, date_arg, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/company-settings", methods=["GET"], endpoint="company_settings")
    @api_view
    def company_settings():
        return jsonify({"success": True, "data": container.company_service.get_settings().to_dict()})

    @app.route("/api/company-settings/profit-rates", methods=["POST"], endpoint="update_profit_rates")
    @api_view
    def update_profit_rates():
        data = json_body()
        settings = container.company_service.update_profit_rates(
            profit_per_packet=data.get("profit_per_packet"),
            profit_per_packet_pickup=data.get("profit_per_packet_pickup"),
        )
        return jsonify({"success": True, "data": settings.to_dict()})

    @app.route("/api/expenses", methods=["GET"], endpoint="list_expenses")
    @api_view
    def list_expenses():
        day = date_arg("date", today_local())
        expenses = container.company_service.expenses_for_date(day)
        return jsonify(
            {
                "success": True,
                "data": [e.to_dict() for e in expenses],
                "total": float(sum(e.amount for e in expenses)),
            }
        )

    @app.route("/api/expenses", methods=["POST"], endpoint="add_expense")
    @api_view
    def add_expense():
        data = json_body()
        expense_id = container.company_service.add_expense(
            expense_date=parse_iso_date(data.get("date", "")),
            category=data.get("category", ""),
            amount=data.get("amount"),
        )
        return jsonify({"success": True, "id": expense_id}), 201

    @app.route("/api/expenses/<int:expense_id>/delete", methods=["POST"], endpoint="delete_expense")
    @api_view
    def delete_expense(expense_id: int):
        container.company_service.delete_expense(expense_id=expense_id)
        return jsonify({"success": True})
