"""Turn aggregated figures into spreadsheet-ready grids (list of rows of plain scalars)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence

from ..common.datetime_utils import format_iso_date, iter_dates
from ..common.money import Scalar, to_cell
from ..company.model import CompanySettings
from ..deliveries.model import DailyDelivery
from ..employees.model import Employee
from ..payroll.aggregation import PacketTotals, revenue
from ..salary.calculator.tiered_calculator import target_for_level
from ..salary.model import SalaryConfiguration

Grid = list[list[Scalar]]

SALARY_REPORT_HEADER = [
    "Name",
    "Parcels",
    "Target",
    "Achievement level",
    "Base Salary",
    "Petrol",
    "Commission",
    "Incentive",
    "Total Salary",
]


def delivery_grid(
    *,
    start: date,
    end: date,
    employees: Sequence[Employee],
    rows: Iterable[DailyDelivery],
    settings: CompanySettings,
) -> Grid:
    """Date x employee grid of delivered / pickuped / profit with a Total Profit column.

    Every date in [start, end] gets a row, zero-filled when nothing was recorded,
    followed by a Total row summing each numeric column.
    """

    header: list[Scalar] = ["Date"]
    for emp in employees:
        header += [f"{emp.name} Delivered", f"{emp.name} Pickuped", f"{emp.name} Profit"]
    header.append("Total Profit")

    by_key: dict[tuple[int, date], PacketTotals] = {}
    for r in rows:
        key = (r.employee_id, r.delivery_date)
        by_key[key] = by_key.get(key, PacketTotals()) + PacketTotals(r.packets_delivered, r.packets_pickuped)

    grid: Grid = [header]
    column_totals: list[Decimal] = [Decimal("0")] * (len(header) - 1)

    for day in iter_dates(start, end):
        values: list[Decimal] = []
        day_profit = Decimal("0")
        for emp in employees:
            t = by_key.get((emp.employee_id, day), PacketTotals())
            profit = revenue(t.delivered, t.pickuped, settings)
            values += [Decimal(t.delivered), Decimal(t.pickuped), profit]
            day_profit += profit
        values.append(day_profit)

        column_totals = [acc + v for acc, v in zip(column_totals, values)]
        grid.append([format_iso_date(day)] + [to_cell(v) for v in values])

    grid.append(["Total"] + [to_cell(v) for v in column_totals])
    return grid


def salary_grid(standings: Iterable, config: SalaryConfiguration) -> Grid:
    """One row per employee standing: parcels, reached target and the salary breakdown."""

    grid: Grid = [list(SALARY_REPORT_HEADER)]
    for s in standings:
        target = target_for_level(config, s.salary.achievement_level)
        grid.append(
            [
                s.employee.name,
                s.total_packets,
                target if target is not None else "",
                s.salary.achievement_level,
                to_cell(s.salary.base_salary),
                to_cell(s.salary.allowances),
                to_cell(s.salary.commission),
                to_cell(s.salary.achievement_bonus),
                to_cell(s.salary.total_salary),
            ]
        )
    return grid
