from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..common.money import to_count, to_money


@dataclass(frozen=True)
class Allowance:
    name: str
    amount: Decimal

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Allowance":
        return cls(name=str(data.get("name") or ""), amount=to_money(data.get("amount")))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "amount": float(self.amount)}


@dataclass(frozen=True)
class TargetLevel:
    """An achievement tier: reaching target_packets in the period unlocks incentive_amount."""

    level_name: str
    target_packets: int
    incentive_amount: Decimal

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TargetLevel":
        return cls(
            level_name=str(data.get("levelName") or ""),
            target_packets=to_count(data.get("targetPackets")),
            incentive_amount=to_money(data.get("incentiveAmount")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "levelName": self.level_name,
            "targetPackets": self.target_packets,
            "incentiveAmount": float(self.incentive_amount),
        }


@dataclass(frozen=True)
class SalaryConfiguration:
    """Immutable snapshot of the salary rules in force.

    Passed explicitly into every calculation; never re-read mid-computation.
    """

    base_salary: Decimal
    commission_per_packet: Decimal
    allowances: tuple[Allowance, ...] = ()
    target_levels: tuple[TargetLevel, ...] = ()
    config_id: Optional[int] = None
    is_active: bool = True
    effective_from: Optional[date] = None
    effective_to: Optional[date] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.config_id,
            "base_salary": float(self.base_salary),
            "commission_per_packet": float(self.commission_per_packet),
            "allowances": [a.to_dict() for a in self.allowances],
            "target_levels": [t.to_dict() for t in self.target_levels],
            "is_active": self.is_active,
            "effective_from": self.effective_from.isoformat() if self.effective_from else None,
            "effective_to": self.effective_to.isoformat() if self.effective_to else None,
        }


@dataclass(frozen=True)
class SalaryBreakdown:
    base_salary: Decimal
    allowances: Decimal
    commission: Decimal
    achievement_bonus: Decimal
    achievement_level: str
    total_salary: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "baseSalary": float(self.base_salary),
            "allowances": float(self.allowances),
            "commission": float(self.commission),
            "achievementBonus": float(self.achievement_bonus),
            "achievementLevel": self.achievement_level,
            "totalSalary": float(self.total_salary),
        }


@dataclass(frozen=True)
class LevelProgress:
    """How far an employee is toward the next tier above the one achieved."""

    percent: Decimal
    next_level_name: Optional[str] = None
    remaining: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "progress": float(self.percent),
            "nextLevel": (
                {"name": self.next_level_name, "remaining": self.remaining}
                if self.next_level_name is not None
                else None
            ),
        }
