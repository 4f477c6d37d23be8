from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, name, email, phone, join_date, status, account_number, ifsc_code, account_holder"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        name=r["name"],
        email=r["email"],
        status=EmployeeStatus(r["status"]),
        phone=r.get("phone"),
        join_date=as_date(r.get("join_date")),
        account_number=r.get("account_number"),
        ifsc_code=r.get("ifsc_code"),
        account_holder=r.get("account_holder"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE status=%s ORDER BY name",
                (EmployeeStatus.ACTIVE.value,),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY name")
            return [_to_employee(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        email: str,
        phone: Optional[str] = None,
        join_date: Optional[date] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, email, phone, join_date, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, email, phone, join_date, EmployeeStatus.ACTIVE.value),
            )
            return int(cur.lastrowid)

    def set_status(self, employee_id: int, *, status: EmployeeStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET status=%s WHERE id=%s",
                (status.value, int(employee_id)),
            )
            return cur.rowcount > 0
