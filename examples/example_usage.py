"""Example: using the service layer directly (no Flask).

Controllers are a thin layer; the payroll rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.courier_payroll.courier_payroll.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = date.today()
    for standing in container.payroll_service.employee_status(year=today.year, month=today.month):
        print(standing.employee.name, standing.total_packets, standing.salary.total_salary)


if __name__ == "__main__":
    main()
