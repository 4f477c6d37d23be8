from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeStatus
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_active(self) -> Sequence[Employee]:
        """Active employees ordered by name."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        email: str,
        phone: Optional[str] = None,
        join_date: Optional[date] = None,
    ) -> int:
        raise NotImplementedError

    def set_status(self, employee_id: int, *, status: EmployeeStatus) -> bool:
        raise NotImplementedError
