from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Sequence

from ..common.validators import require_non_empty, require_non_negative_amount, require_positive_amount
from ..core.exceptions import InvalidInput
from .model import CommonExpense, CompanySettings
from .repository import CompanySettingsRepository, ExpenseRepository

logger = logging.getLogger(__name__)


class CompanyService:
    def __init__(self, settings: CompanySettingsRepository, expenses: ExpenseRepository):
        self._settings = settings
        self._expenses = expenses

    def get_settings(self) -> CompanySettings:
        """Stored settings, or the defaults (50 per delivered packet, 0 per pickup) when none exist."""
        return self._settings.get() or CompanySettings()

    def update_profit_rates(self, *, profit_per_packet: Any, profit_per_packet_pickup: Any) -> CompanySettings:
        per_packet = require_non_negative_amount(profit_per_packet, "Profit per packet")
        per_pickup = require_non_negative_amount(profit_per_packet_pickup, "Profit per pickup")

        self._settings.set_profit_rates(profit_per_packet=per_packet, profit_per_packet_pickup=per_pickup)
        logger.info("Profit rates set to %s per packet, %s per pickup", per_packet, per_pickup)
        return self.get_settings()

    def expenses_between(self, start: date, end: date) -> Sequence[CommonExpense]:
        return self._expenses.list_range(start=start, end=end)

    def expenses_for_date(self, expense_date: date) -> Sequence[CommonExpense]:
        return self._expenses.list_range(start=expense_date, end=expense_date)

    def total_for_date(self, expense_date: date) -> Decimal:
        return sum((e.amount for e in self.expenses_for_date(expense_date)), Decimal("0"))

    def add_expense(self, *, expense_date: date, category: str, amount: Any) -> int:
        category = require_non_empty(category, "Category")
        value = require_positive_amount(amount, "Expense amount")

        expense_id = self._expenses.add(expense_date=expense_date, category=category, amount=value)
        logger.info("Added %s expense of %s on %s", category, value, expense_date)
        return expense_id

    def delete_expense(self, *, expense_id: int) -> None:
        if not self._expenses.delete(expense_id=int(expense_id)):
            raise InvalidInput("Expense not found")
        logger.info("Deleted expense %s", expense_id)
