from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import EmployeeStatus
from ..core.exceptions import InvalidInput
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def create_employee(
        self,
        *,
        name: str,
        email: str,
        phone: Optional[str] = None,
        join_date: Optional[date] = None,
    ) -> int:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        if "@" not in email:
            raise InvalidInput("Email is not valid")

        phone = phone.strip() if phone else None
        employee_id = self._employees.create(name=name, email=email, phone=phone, join_date=join_date)
        logger.info("Created employee %s (%s)", employee_id, name)
        return employee_id

    def set_status(self, *, employee_id: int, status: EmployeeStatus | str) -> None:
        try:
            status = EmployeeStatus(status)
        except ValueError:
            raise InvalidInput(f"Unknown employee status: {status!r}")

        if not self._employees.set_status(int(employee_id), status=status):
            raise InvalidInput("Employee not found")
        logger.info("Employee %s is now %s", employee_id, status.value)
