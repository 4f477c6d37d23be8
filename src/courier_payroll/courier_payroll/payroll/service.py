from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import format_iso_date, month_bounds, shift_month, week_bounds
from ..company.service import CompanyService
from ..core.enums import StatusSort
from ..core.exceptions import ConfigurationMissing, InvalidInput
from ..deliveries.repository import DeliveryRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..salary.calculator.base import SalaryCalculator
from ..salary.calculator.tiered_calculator import TieredSalaryCalculator
from ..salary.model import LevelProgress, SalaryBreakdown, SalaryConfiguration
from ..salary.service import SalaryConfigService
from .aggregation import (
    CompanyProfit,
    PacketTotals,
    WeekComparison,
    aggregate_packets,
    company_profit,
    company_totals,
    employee_cost,
    percent_change,
    revenue,
    total_expenses,
)

logger = logging.getLogger(__name__)

ALL_LEVELS = "all"


@dataclass(frozen=True)
class EmployeeStanding:
    employee: Employee
    total_packets: int
    salary: SalaryBreakdown
    progress: LevelProgress

    @property
    def achievement_level(self) -> str:
        return self.salary.achievement_level

    def to_dict(self) -> dict[str, Any]:
        return {
            "employee_id": self.employee.employee_id,
            "name": self.employee.name,
            "email": self.employee.email,
            "totalPackets": self.total_packets,
            "achievementLevel": self.achievement_level,
            "salary": self.salary.to_dict(),
            **self.progress.to_dict(),
        }


@dataclass(frozen=True)
class DashboardSummary:
    year: int
    month: int
    totals: PacketTotals
    active_employees: int
    profit: CompanyProfit
    weeks: WeekComparison

    def to_dict(self) -> dict[str, Any]:
        w = self.weeks
        prev_year, prev_month = shift_month(self.year, self.month, -1)
        next_year, next_month = shift_month(self.year, self.month, 1)
        return {
            "year": self.year,
            "month": self.month,
            "previousMonth": {"year": prev_year, "month": prev_month},
            "nextMonth": {"year": next_year, "month": next_month},
            "totalPacketsDelivered": self.totals.delivered,
            "totalPacketsPickuped": self.totals.pickuped,
            "activeEmployees": self.active_employees,
            "revenue": float(self.profit.revenue),
            "totalEmployeeCost": float(self.profit.employee_cost),
            "totalExpenses": float(self.profit.expenses),
            "companyProfit": float(self.profit.profit),
            "profitPercentage": float(self.profit.margin),
            "weeks": {
                "current": {
                    "start": format_iso_date(w.current_start),
                    "end": format_iso_date(w.current_end),
                    "packets": w.current.delivered,
                    "pickups": w.current.pickuped,
                    "revenue": float(w.current_revenue),
                    "profit": float(w.current_profit),
                },
                "previous": {
                    "start": format_iso_date(w.previous_start),
                    "end": format_iso_date(w.previous_end),
                    "packets": w.previous.delivered,
                    "pickups": w.previous.pickuped,
                    "revenue": float(w.previous_revenue),
                    "profit": float(w.previous_profit),
                    "change": float(w.change),
                    "changePercent": float(w.change_percent),
                },
            },
        }


class PayrollService:
    """Salary and company profit figures over a date window."""

    def __init__(
        self,
        employees: EmployeeRepository,
        deliveries: DeliveryRepository,
        salary_configs: SalaryConfigService,
        company: CompanyService,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._employees = employees
        self._deliveries = deliveries
        self._salary_configs = salary_configs
        self._company = company
        self._calculator = calculator or TieredSalaryCalculator()

    def standings(
        self,
        *,
        start: date,
        end: date,
        config: Optional[SalaryConfiguration] = None,
    ) -> list[EmployeeStanding]:
        """Per active employee salary for the window, in name order.

        Raises ConfigurationMissing when no config is given and none is active.
        """

        if config is None:
            config = self._salary_configs.get_active()
        employees = self._employees.list_active()
        packets = aggregate_packets(self._deliveries.list_range(start=start, end=end))

        out: list[EmployeeStanding] = []
        for emp in employees:
            total = packets.get(emp.employee_id, PacketTotals()).delivered
            out.append(
                EmployeeStanding(
                    employee=emp,
                    total_packets=total,
                    salary=self._calculator.compute(total, config),
                    progress=self._calculator.progress(total, config),
                )
            )
        return out

    def employee_status(
        self,
        *,
        year: int,
        month: int,
        search: str = "",
        level: str = ALL_LEVELS,
        sort_by: StatusSort | str = StatusSort.PACKETS,
    ) -> list[EmployeeStanding]:
        try:
            sort_by = StatusSort(sort_by)
        except ValueError:
            raise InvalidInput(f"Unknown sort order: {sort_by!r}")

        start, end = month_bounds(year, month)
        try:
            standings = self.standings(start=start, end=end)
        except ConfigurationMissing:
            logger.warning("No active salary configuration; employee status is empty")
            return []

        needle = (search or "").strip().lower()
        level = level or ALL_LEVELS

        rows = [
            s
            for s in standings
            if needle in s.employee.name.lower() and (level == ALL_LEVELS or s.achievement_level == level)
        ]

        if sort_by == StatusSort.PACKETS:
            rows.sort(key=lambda s: s.total_packets, reverse=True)
        elif sort_by == StatusSort.SALARY:
            rows.sort(key=lambda s: s.salary.total_salary, reverse=True)
        else:
            rows.sort(key=lambda s: s.employee.name.lower())
        return rows

    def profit_between(self, *, start: date, end: date) -> tuple[PacketTotals, CompanyProfit]:
        settings = self._company.get_settings()
        config = self._salary_configs.find_active()
        if config is None:
            logger.warning("No active salary configuration; employee cost counted as 0")

        rows = self._deliveries.list_range(start=start, end=end)
        totals = company_totals(rows)
        cost = employee_cost(self._employees.list_active(), aggregate_packets(rows), config, self._calculator)

        return totals, company_profit(
            revenue_total=revenue(totals.delivered, totals.pickuped, settings),
            expenses=total_expenses(self._company.expenses_between(start, end)),
            cost=cost,
        )

    def compare_weeks(self, today: date) -> WeekComparison:
        """This Monday..Sunday week against the one before it.

        A week's profit is its revenue minus the expenses dated inside that week.
        """

        settings = self._company.get_settings()

        def week_figures(start: date, end: date) -> tuple[PacketTotals, Decimal, Decimal]:
            totals = company_totals(self._deliveries.list_range(start=start, end=end))
            week_revenue = revenue(totals.delivered, totals.pickuped, settings)
            expenses = total_expenses(self._company.expenses_between(start, end))
            return totals, week_revenue, week_revenue - expenses

        current_start, current_end = week_bounds(today)
        previous_start, previous_end = week_bounds(today - timedelta(days=7))

        current, current_revenue, current_profit = week_figures(current_start, current_end)
        previous, previous_revenue, previous_profit = week_figures(previous_start, previous_end)

        return WeekComparison(
            current_start=current_start,
            current_end=current_end,
            current=current,
            current_revenue=current_revenue,
            current_profit=current_profit,
            previous_start=previous_start,
            previous_end=previous_end,
            previous=previous,
            previous_revenue=previous_revenue,
            previous_profit=previous_profit,
            change=current_profit - previous_profit,
            change_percent=percent_change(current_profit, previous_profit),
        )

    def dashboard(self, *, year: int, month: int, today: date) -> DashboardSummary:
        start, end = month_bounds(year, month)
        totals, profit = self.profit_between(start=start, end=end)

        return DashboardSummary(
            year=int(year),
            month=int(month),
            totals=totals,
            active_employees=len(self._employees.list_active()),
            profit=profit,
            weeks=self.compare_weeks(today),
        )
