from __future__ import annotations

from typing import Optional, Protocol

from .model import SalaryConfiguration


class SalaryConfigRepository(Protocol):
    def get_active(self) -> Optional[SalaryConfiguration]:
        """At most one row; the most recently updated wins if the store holds several."""

        raise NotImplementedError

    def save_active(self, config: SalaryConfiguration) -> int:
        """Store config as the only active configuration (update when config_id is set).

        Returns the configuration id.
        """

        raise NotImplementedError
