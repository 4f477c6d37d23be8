from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_view, json_body
from ..container import Container
from ..core.constants import DEFAULT_BASE_SALARY, DEFAULT_COMMISSION_PER_PACKET
from .model import SalaryConfiguration


def register(app: Flask, container: Container) -> None:
    @app.route("/api/salary-configuration", methods=["GET"], endpoint="salary_configuration")
    @api_view
    def salary_configuration():
        config = container.salary_config_service.find_active()
        if config is None:
            # Form defaults for a first-time setup.
            defaults = SalaryConfiguration(
                base_salary=DEFAULT_BASE_SALARY,
                commission_per_packet=DEFAULT_COMMISSION_PER_PACKET,
            )
            return jsonify({"success": True, "configured": False, "data": defaults.to_dict()})
        return jsonify({"success": True, "configured": True, "data": config.to_dict()})

    @app.route("/api/salary-configuration", methods=["POST"], endpoint="save_salary_configuration")
    @api_view
    def save_salary_configuration():
        data = json_body()
        config = container.salary_config_service.save(
            base_salary=data.get("base_salary"),
            commission_per_packet=data.get("commission_per_packet"),
            allowances=data.get("allowances") or [],
            target_levels=data.get("target_levels") or [],
        )
        return jsonify({"success": True, "message": "Configuration saved successfully!", "data": config.to_dict()})
