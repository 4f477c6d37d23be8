from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import resolve_range, today_local
from ..common.http import api_view, date_arg, year_month_args
from ..container import Container
from ..core.enums import Period
from .exporter import XLSX_MIMETYPE


def register(app: Flask, container: Container) -> None:
    def _requested_range():
        return resolve_range(
            request.args.get("period", Period.MONTH.value),
            anchor=date_arg("date", today_local()),
            start=date_arg("start"),
            end=date_arg("end"),
        )

    @app.route("/api/reports/deliveries", methods=["GET"], endpoint="delivery_report")
    @api_view
    def delivery_report():
        start, end = _requested_range()
        grid = container.report_service.delivery_report(start=start, end=end)
        return jsonify({"success": True, "start": start.isoformat(), "end": end.isoformat(), "rows": grid})

    @app.route("/api/reports/deliveries.xlsx", methods=["GET"], endpoint="delivery_report_xlsx")
    @api_view
    def delivery_report_xlsx():
        start, end = _requested_range()
        report = container.report_service.delivery_report_file(start=start, end=end)
        return send_file(report.content, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=report.filename)

    @app.route("/api/reports/salary", methods=["GET"], endpoint="salary_report")
    @api_view
    def salary_report():
        year, month = year_month_args()
        grid = container.report_service.salary_report(year=year, month=month)
        return jsonify({"success": True, "rows": grid})

    @app.route("/api/reports/salary.xlsx", methods=["GET"], endpoint="salary_report_xlsx")
    @api_view
    def salary_report_xlsx():
        year, month = year_month_args()
        report = container.report_service.salary_report_file(year=year, month=month)
        return send_file(report.content, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=report.filename)
