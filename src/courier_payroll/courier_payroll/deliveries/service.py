from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Optional

from ..common.validators import require_packet_count
from ..company.service import CompanyService
from ..core.enums import DeliveryStatus
from ..core.exceptions import InvalidInput, StorageError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payroll.aggregation import PacketTotals, aggregate_packets, company_totals, revenue
from .repository import DeliveryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryRow:
    """One line of the daily entry sheet: an active employee and what is stored for the day."""

    employee: Employee
    packets_delivered: int
    packets_pickuped: int
    existing: bool
    notes: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "employee_id": self.employee.employee_id,
            "name": self.employee.name,
            "email": self.employee.email,
            "packets_delivered": self.packets_delivered,
            "packets_pickuped": self.packets_pickuped,
            "existing": self.existing,
            "notes": self.notes or "",
        }


@dataclass(frozen=True)
class SaveAllResult:
    saved: list[int] = field(default_factory=list)
    failed: list[tuple[Optional[int], str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


@dataclass(frozen=True)
class DayProfitPreview:
    delivery_date: date
    rows: list[dict]
    totals: PacketTotals
    revenue: Decimal
    expenses: Decimal
    profit: Decimal


def _parse_employee_id(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidInput("Employee id is required")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidInput("Employee id is required")


class DailyEntryService:
    def __init__(
        self,
        deliveries: DeliveryRepository,
        employees: EmployeeRepository,
        company: CompanyService,
    ):
        self._deliveries = deliveries
        self._employees = employees
        self._company = company

    def entries_for_date(self, delivery_date: date) -> list[EntryRow]:
        by_employee = {r.employee_id: r for r in self._deliveries.list_range(start=delivery_date, end=delivery_date)}

        rows: list[EntryRow] = []
        for emp in self._employees.list_active():
            existing = by_employee.get(emp.employee_id)
            rows.append(
                EntryRow(
                    employee=emp,
                    packets_delivered=existing.packets_delivered if existing else 0,
                    packets_pickuped=existing.packets_pickuped if existing else 0,
                    existing=existing is not None,
                    notes=existing.notes if existing else None,
                )
            )
        return rows

    def save_entry(
        self,
        *,
        employee_id: int,
        delivery_date: date,
        packets_delivered: Any,
        packets_pickuped: Any = 0,
        notes: Optional[str] = None,
    ) -> int:
        delivered = require_packet_count(packets_delivered, "Packets delivered")
        pickuped = require_packet_count(packets_pickuped, "Packets picked up")

        settings = self._company.get_settings()
        delivery_id = self._deliveries.set_delivery(
            employee_id=int(employee_id),
            delivery_date=delivery_date,
            packets_delivered=delivered,
            packets_pickuped=pickuped,
            revenue=revenue(delivered, pickuped, settings),
            status=DeliveryStatus.COMPLETED,
            notes=notes.strip() if notes else None,
        )
        logger.info(
            "Saved delivery for employee %s on %s: %d delivered, %d picked up",
            employee_id,
            delivery_date,
            delivered,
            pickuped,
        )
        return delivery_id

    def save_all(self, *, delivery_date: date, entries: Iterable[dict[str, Any]]) -> SaveAllResult:
        """Save each entry independently; a failure does not undo earlier saves.

        Entries with no packets are skipped unless a row already exists for that day.
        """

        existing_ids = {r.employee_id for r in self._deliveries.list_range(start=delivery_date, end=delivery_date)}
        result = SaveAllResult()

        for entry in entries:
            employee_id: Optional[int] = None
            try:
                employee_id = _parse_employee_id(entry.get("employee_id"))
                delivered = require_packet_count(entry.get("packets_delivered", 0), "Packets delivered")
                pickuped = require_packet_count(entry.get("packets_pickuped", 0), "Packets picked up")

                if not (delivered or pickuped) and employee_id not in existing_ids:
                    continue

                self.save_entry(
                    employee_id=employee_id,
                    delivery_date=delivery_date,
                    packets_delivered=delivered,
                    packets_pickuped=pickuped,
                    notes=entry.get("notes"),
                )
                result.saved.append(employee_id)
            except (InvalidInput, StorageError) as e:
                logger.warning("Could not save delivery for employee %s on %s: %s", employee_id, delivery_date, e)
                result.failed.append((employee_id, str(e)))

        return result

    def profit_preview(self, delivery_date: date) -> DayProfitPreview:
        """Revenue per employee for the day, minus that day's common expenses."""

        settings = self._company.get_settings()
        rows = self._deliveries.list_range(start=delivery_date, end=delivery_date)
        packets = aggregate_packets(rows)

        out_rows = []
        for emp in self._employees.list_active():
            t = packets.get(emp.employee_id, PacketTotals())
            out_rows.append(
                {
                    "employee_id": emp.employee_id,
                    "name": emp.name,
                    "packets_delivered": t.delivered,
                    "packets_pickuped": t.pickuped,
                    "revenue": revenue(t.delivered, t.pickuped, settings),
                }
            )

        totals = company_totals(rows)
        day_revenue = revenue(totals.delivered, totals.pickuped, settings)
        expenses = self._company.total_for_date(delivery_date)
        return DayProfitPreview(
            delivery_date=delivery_date,
            rows=out_rows,
            totals=totals,
            revenue=day_revenue,
            expenses=expenses,
            profit=day_revenue - expenses,
        )
