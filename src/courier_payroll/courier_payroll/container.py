from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .company.mysql_company_repository import MySQLCompanySettingsRepository, MySQLExpenseRepository
from .company.repository import CompanySettingsRepository, ExpenseRepository
from .company.service import CompanyService
from .database.connection import DBConfig, DatabaseConnection
from .deliveries.mysql_delivery_repository import MySQLDeliveryRepository
from .deliveries.repository import DeliveryRepository
from .deliveries.service import DailyEntryService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.service import PayrollService
from .reports.service import ReportService
from .salary.mysql_salary_repository import MySQLSalaryConfigRepository
from .salary.repository import SalaryConfigRepository
from .salary.service import SalaryConfigService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    deliveries_repo: DeliveryRepository
    salary_configs_repo: SalaryConfigRepository
    company_settings_repo: CompanySettingsRepository
    expenses_repo: ExpenseRepository

    employee_service: EmployeeService
    salary_config_service: SalaryConfigService
    company_service: CompanyService
    daily_entry_service: DailyEntryService
    payroll_service: PayrollService
    report_service: ReportService


def wire_services(
    *,
    employees_repo: EmployeeRepository,
    deliveries_repo: DeliveryRepository,
    salary_configs_repo: SalaryConfigRepository,
    company_settings_repo: CompanySettingsRepository,
    expenses_repo: ExpenseRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build the service graph over any set of repositories (MySQL in the app, fakes in tests)."""

    employee_service = EmployeeService(employees_repo)
    salary_config_service = SalaryConfigService(salary_configs_repo)
    company_service = CompanyService(company_settings_repo, expenses_repo)
    daily_entry_service = DailyEntryService(deliveries_repo, employees_repo, company_service)
    payroll_service = PayrollService(employees_repo, deliveries_repo, salary_config_service, company_service)
    report_service = ReportService(
        employees_repo,
        deliveries_repo,
        company_service,
        salary_config_service,
        payroll_service,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        deliveries_repo=deliveries_repo,
        salary_configs_repo=salary_configs_repo,
        company_settings_repo=company_settings_repo,
        expenses_repo=expenses_repo,
        employee_service=employee_service,
        salary_config_service=salary_config_service,
        company_service=company_service,
        daily_entry_service=daily_entry_service,
        payroll_service=payroll_service,
        report_service=report_service,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire_services(
        conn=conn,
        employees_repo=MySQLEmployeeRepository(conn),
        deliveries_repo=MySQLDeliveryRepository(conn),
        salary_configs_repo=MySQLSalaryConfigRepository(conn),
        company_settings_repo=MySQLCompanySettingsRepository(conn),
        expenses_repo=MySQLExpenseRepository(conn),
    )
