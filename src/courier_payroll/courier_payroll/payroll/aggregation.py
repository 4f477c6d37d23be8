"""Aggregation over pre-filtered delivery rows.

Callers fetch rows for the wanted date range; nothing here filters by date.
Revenue is always recomputed from the CompanySettings snapshot passed in, never
read from the revenue stored on a delivery row.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence

from ..common.money import quantize
from ..company.model import CommonExpense, CompanySettings
from ..deliveries.model import DailyDelivery
from ..employees.model import Employee
from ..salary.calculator.base import SalaryCalculator
from ..salary.model import SalaryConfiguration

ZERO = Decimal("0")


@dataclass(frozen=True)
class PacketTotals:
    delivered: int = 0
    pickuped: int = 0

    def __add__(self, other: "PacketTotals") -> "PacketTotals":
        return PacketTotals(self.delivered + other.delivered, self.pickuped + other.pickuped)


@dataclass(frozen=True)
class CompanyProfit:
    revenue: Decimal
    expenses: Decimal
    employee_cost: Decimal
    profit: Decimal
    margin: Decimal


@dataclass(frozen=True)
class WeekComparison:
    current_start: date
    current_end: date
    current: PacketTotals
    current_revenue: Decimal
    current_profit: Decimal
    previous_start: date
    previous_end: date
    previous: PacketTotals
    previous_revenue: Decimal
    previous_profit: Decimal
    change: Decimal
    change_percent: Decimal


def revenue(delivered: int, pickuped: int, settings: CompanySettings) -> Decimal:
    return Decimal(delivered) * settings.profit_per_packet + Decimal(pickuped) * settings.profit_per_packet_pickup


def aggregate_packets(rows: Iterable[DailyDelivery]) -> dict[int, PacketTotals]:
    totals: dict[int, PacketTotals] = {}
    for r in rows:
        current = totals.get(r.employee_id, PacketTotals())
        totals[r.employee_id] = current + PacketTotals(r.packets_delivered, r.packets_pickuped)
    return totals


def company_totals(rows: Iterable[DailyDelivery]) -> PacketTotals:
    total = PacketTotals()
    for r in rows:
        total = total + PacketTotals(r.packets_delivered, r.packets_pickuped)
    return total


def total_expenses(expenses: Iterable[CommonExpense]) -> Decimal:
    return sum((e.amount for e in expenses), ZERO)


def employee_cost(
    employees: Sequence[Employee],
    packets_by_employee: Mapping[int, PacketTotals],
    config: Optional[SalaryConfiguration],
    calculator: SalaryCalculator,
) -> Decimal:
    """Sum of total salary across employees; 0 when no configuration is active."""

    if config is None:
        return ZERO

    cost = ZERO
    for emp in employees:
        packets = packets_by_employee.get(emp.employee_id, PacketTotals()).delivered
        cost += calculator.compute(packets, config).total_salary
    return cost


def profit_margin(profit: Decimal, revenue_total: Decimal) -> Decimal:
    if revenue_total == 0:
        return ZERO
    return quantize(profit / revenue_total * 100)


def percent_change(current: Decimal, previous: Decimal) -> Decimal:
    if previous == 0:
        return ZERO
    return quantize((current - previous) / previous * 100)


def company_profit(*, revenue_total: Decimal, expenses: Decimal, cost: Decimal) -> CompanyProfit:
    profit = revenue_total - expenses - cost
    return CompanyProfit(
        revenue=revenue_total,
        expenses=expenses,
        employee_cost=cost,
        profit=profit,
        margin=profit_margin(profit, revenue_total),
    )
