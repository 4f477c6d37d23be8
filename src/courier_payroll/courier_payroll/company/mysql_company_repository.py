from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.money import to_money
from ..core.constants import DEFAULT_COMPANY_NAME, DEFAULT_CURRENCY
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall, fetchone
from .model import CommonExpense, CompanySettings
from .repository import CompanySettingsRepository, ExpenseRepository

# The settings table holds a single row pinned to this key.
SINGLETON_ID = 1


class MySQLCompanySettingsRepository(CompanySettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[CompanySettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, company_name, profit_per_packet, profit_per_packet_pickup, currency,
                       financial_year_start_month, financial_year_start_date
                FROM company_settings
                ORDER BY id
                LIMIT 1
                """
            )
            r = fetchone(cur)
            if not r:
                return None
            return CompanySettings(
                settings_id=int(r["id"]),
                company_name=r.get("company_name") or DEFAULT_COMPANY_NAME,
                profit_per_packet=to_money(r.get("profit_per_packet")),
                profit_per_packet_pickup=to_money(r.get("profit_per_packet_pickup")),
                currency=r.get("currency") or DEFAULT_CURRENCY,
                financial_year_start_month=int(r.get("financial_year_start_month") or 4),
                financial_year_start_date=int(r.get("financial_year_start_date") or 1),
            )

    def set_profit_rates(self, *, profit_per_packet: Decimal, profit_per_packet_pickup: Decimal) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO company_settings(id, company_name, profit_per_packet, profit_per_packet_pickup, currency)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    profit_per_packet=VALUES(profit_per_packet),
                    profit_per_packet_pickup=VALUES(profit_per_packet_pickup),
                    updated_at=CURRENT_TIMESTAMP
                """,
                (SINGLETON_ID, DEFAULT_COMPANY_NAME, profit_per_packet, profit_per_packet_pickup, DEFAULT_CURRENCY),
            )


class MySQLExpenseRepository(ExpenseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: date, end: date) -> Sequence[CommonExpense]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, expense_date, category, amount
                FROM company_common_expenses
                WHERE expense_date BETWEEN %s AND %s
                ORDER BY expense_date, id
                """,
                (start, end),
            )
            return [
                CommonExpense(
                    expense_id=int(r["id"]),
                    expense_date=as_date(r["expense_date"]),
                    category=r["category"],
                    amount=to_money(r.get("amount")),
                )
                for r in fetchall(cur)
            ]

    def add(self, *, expense_date: date, category: str, amount: Decimal) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO company_common_expenses(expense_date, category, amount) VALUES(%s,%s,%s)",
                (expense_date, category, amount),
            )
            return int(cur.lastrowid)

    def delete(self, *, expense_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM company_common_expenses WHERE id=%s", (int(expense_id),))
            return cur.rowcount > 0
