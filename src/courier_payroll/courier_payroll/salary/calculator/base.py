from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import LevelProgress, SalaryBreakdown, SalaryConfiguration


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for salary rules)."""

    @abstractmethod
    def compute(self, packets: int, config: SalaryConfiguration) -> SalaryBreakdown:
        raise NotImplementedError

    @abstractmethod
    def progress(self, packets: int, config: SalaryConfiguration) -> LevelProgress:
        raise NotImplementedError
