from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import month_bounds, require_range
from ..company.service import CompanyService
from ..deliveries.repository import DeliveryRepository
from ..employees.repository import EmployeeRepository
from ..payroll.service import PayrollService
from ..salary.service import SalaryConfigService
from .exporter import delivery_report_filename, salary_report_filename, write_xlsx
from .formatter import SALARY_REPORT_HEADER, Grid, delivery_grid, salary_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportFile:
    filename: str
    content: io.BytesIO


class ReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        deliveries: DeliveryRepository,
        company: CompanyService,
        salary_configs: SalaryConfigService,
        payroll: PayrollService,
    ):
        self._employees = employees
        self._deliveries = deliveries
        self._company = company
        self._salary_configs = salary_configs
        self._payroll = payroll

    def delivery_report(self, *, start: date, end: date) -> Grid:
        start, end = require_range(start, end)
        return delivery_grid(
            start=start,
            end=end,
            employees=self._employees.list_active(),
            rows=self._deliveries.list_range(start=start, end=end),
            settings=self._company.get_settings(),
        )

    def salary_report(self, *, year: int, month: int) -> Grid:
        """Header-only grid when no salary configuration is active."""

        start, end = month_bounds(year, month)
        config = self._salary_configs.find_active()
        if config is None:
            logger.warning("No active salary configuration; salary report for %s-%s is empty", year, month)
            return [list(SALARY_REPORT_HEADER)]

        return salary_grid(self._payroll.standings(start=start, end=end, config=config), config)

    def delivery_report_file(self, *, start: date, end: date) -> ReportFile:
        grid = self.delivery_report(start=start, end=end)
        return ReportFile(
            filename=delivery_report_filename(start, end),
            content=write_xlsx(grid, sheet_name="Deliveries"),
        )

    def salary_report_file(self, *, year: int, month: int) -> ReportFile:
        grid = self.salary_report(year=year, month=month)
        return ReportFile(
            filename=salary_report_filename(year, month),
            content=write_xlsx(grid, sheet_name="Salary Report"),
        )
