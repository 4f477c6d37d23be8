from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.money import to_money
from ..core.enums import DeliveryStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall, fetchone
from .model import DailyDelivery
from .repository import DeliveryRepository


class MySQLDeliveryRepository(DeliveryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[DailyDelivery]:
        clauses = ["delivery_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]

        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, employee_id, delivery_date, packets_delivered,
                       COALESCE(packets_pickuped, 0) AS packets_pickuped,
                       status, revenue, notes, edited_at
                FROM daily_deliveries
                WHERE {where}
                ORDER BY delivery_date, employee_id
                """,
                tuple(params),
            )
            return [
                DailyDelivery(
                    delivery_id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    delivery_date=as_date(r["delivery_date"]),
                    packets_delivered=int(r.get("packets_delivered") or 0),
                    packets_pickuped=int(r.get("packets_pickuped") or 0),
                    status=DeliveryStatus(r.get("status") or DeliveryStatus.COMPLETED.value),
                    revenue=to_money(r.get("revenue")) if r.get("revenue") is not None else None,
                    notes=r.get("notes"),
                    edited_at=r.get("edited_at"),
                )
                for r in fetchall(cur)
            ]

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_deliveries
                    (employee_id, delivery_date, packets_delivered, packets_pickuped, revenue, status, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    packets_delivered=VALUES(packets_delivered),
                    packets_pickuped=VALUES(packets_pickuped),
                    revenue=VALUES(revenue),
                    notes=COALESCE(VALUES(notes), notes),
                    edited_at=CURRENT_TIMESTAMP,
                    updated_at=CURRENT_TIMESTAMP
                """,
                (int(employee_id), delivery_date, int(packets_delivered), int(packets_pickuped), revenue, status.value, notes),
            )

            # If it was an update, lastrowid can be 0; fetch the id.
            if cur.lastrowid:
                return int(cur.lastrowid)

            cur.execute(
                "SELECT id FROM daily_deliveries WHERE employee_id=%s AND delivery_date=%s",
                (int(employee_id), delivery_date),
            )
            r = fetchone(cur)
            return int(r["id"]) if r else 0
