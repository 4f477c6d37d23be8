from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Optional

from ..common.validators import (
    require_non_empty,
    require_non_negative_amount,
    require_packet_count,
    require_positive_amount,
)
from ..core.exceptions import ConfigurationMissing, InvalidInput
from .model import Allowance, SalaryConfiguration, TargetLevel
from .repository import SalaryConfigRepository

logger = logging.getLogger(__name__)


class SalaryConfigService:
    """Read and save the single active salary configuration."""

    def __init__(self, configs: SalaryConfigRepository):
        self._configs = configs

    def find_active(self) -> Optional[SalaryConfiguration]:
        return self._configs.get_active()

    def get_active(self) -> SalaryConfiguration:
        config = self._configs.get_active()
        if config is None:
            raise ConfigurationMissing("No active salary configuration found")
        return config

    def save(
        self,
        *,
        base_salary: Any,
        commission_per_packet: Any,
        allowances: Iterable[dict[str, Any]] = (),
        target_levels: Iterable[dict[str, Any]] = (),
    ) -> SalaryConfiguration:
        config = SalaryConfiguration(
            base_salary=require_non_negative_amount(base_salary, "Base salary"),
            commission_per_packet=require_non_negative_amount(commission_per_packet, "Commission per packet"),
            allowances=tuple(self._parse_allowance(a) for a in allowances),
            target_levels=self._parse_levels(target_levels),
        )

        current = self._configs.get_active()
        if current is not None:
            config = replace(config, config_id=current.config_id, effective_from=current.effective_from)

        config_id = self._configs.save_active(config)
        logger.info(
            "Saved salary configuration %s (%d allowances, %d levels)",
            config_id,
            len(config.allowances),
            len(config.target_levels),
        )
        return self.get_active()

    @staticmethod
    def _parse_allowance(data: dict[str, Any]) -> Allowance:
        return Allowance(
            name=require_non_empty(data.get("name", ""), "Allowance name"),
            amount=require_positive_amount(data.get("amount"), "Allowance amount"),
        )

    @staticmethod
    def _parse_levels(items: Iterable[dict[str, Any]]) -> tuple[TargetLevel, ...]:
        levels: list[TargetLevel] = []
        seen: set[int] = set()
        for data in items:
            level = TargetLevel(
                level_name=require_non_empty(data.get("levelName", ""), "Level name"),
                target_packets=require_packet_count(data.get("targetPackets"), "Target packets"),
                incentive_amount=require_non_negative_amount(data.get("incentiveAmount"), "Incentive amount"),
            )
            if level.target_packets in seen:
                raise InvalidInput(f"Two levels cannot share the target of {level.target_packets} packets")
            seen.add(level.target_packets)
            levels.append(level)
        return tuple(levels)
