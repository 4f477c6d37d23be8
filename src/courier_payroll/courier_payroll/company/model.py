from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..core.constants import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_CURRENCY,
    DEFAULT_PROFIT_PER_PACKET,
    DEFAULT_PROFIT_PER_PICKUP,
)


@dataclass(frozen=True)
class CompanySettings:
    """Singleton rates converting packet volume into company revenue."""

    profit_per_packet: Decimal = DEFAULT_PROFIT_PER_PACKET
    profit_per_packet_pickup: Decimal = DEFAULT_PROFIT_PER_PICKUP
    company_name: str = DEFAULT_COMPANY_NAME
    currency: str = DEFAULT_CURRENCY
    financial_year_start_month: int = 4
    financial_year_start_date: int = 1
    settings_id: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.settings_id,
            "company_name": self.company_name,
            "profit_per_packet": float(self.profit_per_packet),
            "profit_per_packet_pickup": float(self.profit_per_packet_pickup),
            "currency": self.currency,
            "financial_year_start_month": self.financial_year_start_month,
            "financial_year_start_date": self.financial_year_start_date,
        }


@dataclass(frozen=True)
class CommonExpense:
    expense_id: int
    expense_date: date
    category: str
    amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.expense_id,
            "expense_date": self.expense_date.isoformat(),
            "category": self.category,
            "amount": float(self.amount),
        }
