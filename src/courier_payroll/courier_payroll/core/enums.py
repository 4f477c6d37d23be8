from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status; only active employees are paid and reported."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class DeliveryStatus(str, Enum):
    """Status stored on a daily delivery row; saved entries are completed."""

    COMPLETED = "completed"


class Period(str, Enum):
    """Aggregation window presets for reports."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


class StatusSort(str, Enum):
    PACKETS = "packets"
    SALARY = "salary"
    NAME = "name"
