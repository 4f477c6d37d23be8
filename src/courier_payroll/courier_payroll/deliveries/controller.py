from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_iso_date, parse_iso_date, today_local
from ..common.http import api_view, date_arg, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/daily-entry", methods=["GET"], endpoint="daily_entry")
    @api_view
    def daily_entry():
        day = date_arg("date", today_local())
        rows = container.daily_entry_service.entries_for_date(day)
        return jsonify({"success": True, "date": format_iso_date(day), "data": [r.to_dict() for r in rows]})

    @app.route("/api/daily-entry", methods=["POST"], endpoint="save_daily_entry")
    @api_view
    def save_daily_entry():
        data = json_body()
        delivery_id = container.daily_entry_service.save_entry(
            employee_id=int(data.get("employee_id") or 0),
            delivery_date=parse_iso_date(data.get("date", "")),
            packets_delivered=data.get("packets_delivered", 0),
            packets_pickuped=data.get("packets_pickuped", 0),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "id": delivery_id})

    @app.route("/api/daily-entry/save-all", methods=["POST"], endpoint="save_all_daily_entries")
    @api_view
    def save_all_daily_entries():
        data = json_body()
        result = container.daily_entry_service.save_all(
            delivery_date=parse_iso_date(data.get("date", "")),
            entries=data.get("entries") or [],
        )
        if result.ok:
            message = "All entries saved successfully!"
        else:
            message = f"{len(result.failed)} entries could not be saved. Please try again."
        return jsonify(
            {
                "success": result.ok,
                "message": message,
                "saved": result.saved,
                "failed": [{"employee_id": emp_id, "message": msg} for emp_id, msg in result.failed],
            }
        )

    @app.route("/api/daily-entry/profit", methods=["GET"], endpoint="daily_entry_profit")
    @api_view
    def daily_entry_profit():
        preview = container.daily_entry_service.profit_preview(date_arg("date", today_local()))
        return jsonify(
            {
                "success": True,
                "date": format_iso_date(preview.delivery_date),
                "rows": [{**r, "revenue": float(r["revenue"])} for r in preview.rows],
                "packetsDelivered": preview.totals.delivered,
                "packetsPickuped": preview.totals.pickuped,
                "revenue": float(preview.revenue),
                "expenses": float(preview.expenses),
                "profit": float(preview.profit),
            }
        )
