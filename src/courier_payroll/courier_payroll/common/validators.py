from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..core.exceptions import InvalidInput
from .money import to_money


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise InvalidInput(f"{field_name} is required")
    return str(value).strip()


def require_packet_count(value: Any, field_name: str = "packets") -> int:
    """Packet counts are whole, non-negative numbers."""
    if isinstance(value, float) and not value.is_integer():
        raise InvalidInput(f"{field_name} must be a whole number")
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{field_name} must be a whole number")
    if count < 0:
        raise InvalidInput(f"{field_name} cannot be negative")
    return count


def require_finite_amount(value: Any, field_name: str) -> Decimal:
    amount = to_money(value)
    if not amount.is_finite():
        raise InvalidInput(f"{field_name} must be a number")
    return amount


def require_non_negative_amount(value: Any, field_name: str) -> Decimal:
    amount = require_finite_amount(value, field_name)
    if amount < 0:
        raise InvalidInput(f"{field_name} cannot be negative")
    return amount


def require_positive_amount(value: Any, field_name: str) -> Decimal:
    amount = require_finite_amount(value, field_name)
    if amount <= 0:
        raise InvalidInput(f"{field_name} must be greater than 0")
    return amount
