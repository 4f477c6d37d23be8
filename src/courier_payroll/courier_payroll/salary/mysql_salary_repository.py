from __future__ import annotations

from typing import Optional

from ..common.money import to_money
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, dump_json, fetchone, load_json_list
from .model import Allowance, SalaryConfiguration, TargetLevel
from .repository import SalaryConfigRepository


def _to_config(r: dict) -> SalaryConfiguration:
    return SalaryConfiguration(
        config_id=int(r["id"]),
        base_salary=to_money(r.get("base_salary")),
        commission_per_packet=to_money(r.get("commission_per_packet")),
        allowances=tuple(Allowance.from_dict(a) for a in load_json_list(r.get("allowances"))),
        target_levels=tuple(TargetLevel.from_dict(t) for t in load_json_list(r.get("target_levels"))),
        is_active=bool(r.get("is_active")),
        effective_from=as_date(r.get("effective_from")),
        effective_to=as_date(r.get("effective_to")),
    )


class MySQLSalaryConfigRepository(SalaryConfigRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_active(self) -> Optional[SalaryConfiguration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, base_salary, commission_per_packet, allowances, target_levels,
                       is_active, effective_from, effective_to
                FROM salary_configurations
                WHERE is_active=1
                ORDER BY updated_at DESC, id DESC
                LIMIT 1
                """
            )
            r = fetchone(cur)
            return _to_config(r) if r else None

    def save_active(self, config: SalaryConfiguration) -> int:
        params = (
            config.base_salary,
            config.commission_per_packet,
            dump_json([a.to_dict() for a in config.allowances]),
            dump_json([t.to_dict() for t in config.target_levels]),
        )

        with db_cursor(self._conn_factory) as (_, cur):
            if config.config_id:
                cur.execute(
                    """
                    UPDATE salary_configurations
                    SET base_salary=%s, commission_per_packet=%s, allowances=%s, target_levels=%s,
                        is_active=1, updated_at=CURRENT_TIMESTAMP
                    WHERE id=%s
                    """,
                    params + (int(config.config_id),),
                )
                config_id = int(config.config_id)
            else:
                cur.execute(
                    """
                    INSERT INTO salary_configurations
                        (base_salary, commission_per_packet, allowances, target_levels, is_active, effective_from)
                    VALUES(%s,%s,%s,%s,1,CURRENT_DATE)
                    """,
                    params,
                )
                config_id = int(cur.lastrowid)

            # Same transaction: keep exactly one active configuration.
            cur.execute(
                "UPDATE salary_configurations SET is_active=0 WHERE is_active=1 AND id<>%s",
                (config_id,),
            )
            return config_id
