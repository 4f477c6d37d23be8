from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import DeliveryStatus
from .model import DailyDelivery


class DeliveryRepository(Protocol):
    def list_range(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[DailyDelivery]:
        """Rows with start <= delivery_date <= end."""

        raise NotImplementedError

    def set_delivery(
        self,
        *,
        employee_id: int,
        delivery_date: date,
        packets_delivered: int,
        packets_pickuped: int,
        revenue: Decimal,
        status: DeliveryStatus = DeliveryStatus.COMPLETED,
        notes: Optional[str] = None,
    ) -> int:
        """Create or replace the row for (employee_id, delivery_date) atomically.

        Returns delivery id.
        """

        raise NotImplementedError
