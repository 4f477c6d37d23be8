from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ...common.money import quantize
from ...core.constants import NO_ACHIEVEMENT_LEVEL
from ...core.exceptions import InvalidInput
from ..model import LevelProgress, SalaryBreakdown, SalaryConfiguration, TargetLevel
from .base import SalaryCalculator


def _levels_by_threshold_desc(levels: Sequence[TargetLevel]) -> list[TargetLevel]:
    # Equal thresholds: larger incentive first; the stable sort keeps input order after that.
    return sorted(levels, key=lambda lvl: (lvl.target_packets, lvl.incentive_amount), reverse=True)


def select_level(packets: int, levels: Sequence[TargetLevel]) -> Optional[TargetLevel]:
    """Highest threshold not above packets. Bonuses are never cumulative."""

    for level in _levels_by_threshold_desc(levels):
        if level.target_packets <= packets:
            return level
    return None


def target_for_level(config: SalaryConfiguration, level_name: str) -> Optional[int]:
    for level in config.target_levels:
        if level.level_name == level_name:
            return level.target_packets
    return None


class TieredSalaryCalculator(SalaryCalculator):
    """Base + allowances + per-packet commission + the single highest tier bonus reached."""

    def compute(self, packets: int, config: SalaryConfiguration) -> SalaryBreakdown:
        if packets < 0:
            raise InvalidInput("Packet count cannot be negative")

        base_salary = config.base_salary
        allowances = sum((a.amount for a in config.allowances), Decimal("0"))
        commission = quantize(Decimal(packets) * config.commission_per_packet)

        level = select_level(packets, config.target_levels)
        if level is None:
            bonus, level_name = Decimal("0"), NO_ACHIEVEMENT_LEVEL
        else:
            bonus, level_name = level.incentive_amount, level.level_name

        return SalaryBreakdown(
            base_salary=base_salary,
            allowances=allowances,
            commission=commission,
            achievement_bonus=bonus,
            achievement_level=level_name,
            total_salary=base_salary + allowances + commission + bonus,
        )

    def progress(self, packets: int, config: SalaryConfiguration) -> LevelProgress:
        if packets < 0:
            raise InvalidInput("Packet count cannot be negative")

        ascending = sorted(config.target_levels, key=lambda lvl: lvl.target_packets)
        next_level = next((lvl for lvl in ascending if lvl.target_packets > packets), None)

        if next_level is None:
            achieved = select_level(packets, ascending) is not None
            return LevelProgress(percent=Decimal("100") if achieved else Decimal("0"))

        percent = min(Decimal(packets) / Decimal(next_level.target_packets) * 100, Decimal("100"))
        return LevelProgress(
            percent=quantize(percent),
            next_level_name=next_level.level_name,
            remaining=next_level.target_packets - packets,
        )
