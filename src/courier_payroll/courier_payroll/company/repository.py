from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import CommonExpense, CompanySettings


class CompanySettingsRepository(Protocol):
    def get(self) -> Optional[CompanySettings]:
        raise NotImplementedError

    def set_profit_rates(self, *, profit_per_packet: Decimal, profit_per_packet_pickup: Decimal) -> None:
        """Insert-or-update the singleton row in one statement."""

        raise NotImplementedError


class ExpenseRepository(Protocol):
    def list_range(self, *, start: date, end: date) -> Sequence[CommonExpense]:
        raise NotImplementedError

    def add(self, *, expense_date: date, category: str, amount: Decimal) -> int:
        raise NotImplementedError

    def delete(self, *, expense_id: int) -> bool:
        raise NotImplementedError
