from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import DeliveryStatus


@dataclass(frozen=True)
class DailyDelivery:
    """Domain entity: one employee's packet counts for one day."""

    delivery_id: int
    employee_id: int
    delivery_date: date
    packets_delivered: int = 0
    packets_pickuped: int = 0
    status: DeliveryStatus = DeliveryStatus.COMPLETED
    # Snapshot written at save time; reports recompute revenue from current rates.
    revenue: Optional[Decimal] = None
    notes: Optional[str] = None
    edited_at: Optional[datetime] = None
