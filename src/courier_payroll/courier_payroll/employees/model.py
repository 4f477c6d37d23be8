from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: a delivery employee.

    Note: Plain data object (no DB access code).
    """

    employee_id: int
    name: str
    email: str
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    phone: Optional[str] = None
    join_date: Optional[date] = None
    account_number: Optional[str] = None
    ifsc_code: Optional[str] = None
    account_holder: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE
