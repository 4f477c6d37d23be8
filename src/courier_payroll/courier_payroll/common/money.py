from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Union

from ..core.constants import MONEY_QUANT

Scalar = Union[str, int, float]


def to_money(value: Any) -> Decimal:
    """Coerce a raw store/form value to Decimal; missing or malformed values count as 0."""

    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal(int(value))
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal("0")


def quantize(value: Decimal) -> Decimal:
    return value.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)


def to_cell(value: Any) -> Scalar:
    """Plain scalar for spreadsheet grids: integral Decimals become int, others float."""

    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    return value


def to_count(value: Any) -> int:
    """Whole count from a raw store value; missing or malformed values count as 0."""

    amount = to_money(value)
    if not amount.is_finite():
        return 0
    return int(amount)
