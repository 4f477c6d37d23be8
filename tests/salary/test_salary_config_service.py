from decimal import Decimal

import pytest

from src.courier_payroll.courier_payroll.core.exceptions import ConfigurationMissing, InvalidInput
from src.courier_payroll.courier_payroll.salary.model import TargetLevel
from src.courier_payroll.courier_payroll.salary.service import SalaryConfigService
from tests.fakes import FakeSalaryConfigs, scenario_config

LEVELS = [
    {"levelName": "Bronze", "targetPackets": 100, "incentiveAmount": 500},
    {"levelName": "Silver", "targetPackets": 200, "incentiveAmount": 1200},
]


def test_get_active_raises_when_missing():
    svc = SalaryConfigService(FakeSalaryConfigs())

    assert svc.find_active() is None
    with pytest.raises(ConfigurationMissing):
        svc.get_active()


def test_first_save_creates_active_configuration():
    repo = FakeSalaryConfigs()
    svc = SalaryConfigService(repo)

    config = svc.save(
        base_salary=15000,
        commission_per_packet="10",
        allowances=[{"name": "Petrol", "amount": 1000}],
        target_levels=LEVELS,
    )

    assert config.config_id == 101
    assert config.base_salary == Decimal("15000")
    assert config.commission_per_packet == Decimal("10")
    assert [a.name for a in config.allowances] == ["Petrol"]
    assert [lvl.level_name for lvl in config.target_levels] == ["Bronze", "Silver"]


def test_save_updates_the_current_active_configuration():
    repo = FakeSalaryConfigs(scenario_config(config_id=7))
    svc = SalaryConfigService(repo)

    config = svc.save(base_salary=18000, commission_per_packet=12, target_levels=LEVELS)

    assert config.config_id == 7
    assert config.base_salary == 18000
    assert config.allowances == ()


def test_duplicate_thresholds_rejected():
    svc = SalaryConfigService(FakeSalaryConfigs())
    levels = LEVELS + [{"levelName": "Gold", "targetPackets": 200, "incentiveAmount": 2000}]

    with pytest.raises(InvalidInput):
        svc.save(base_salary=15000, commission_per_packet=10, target_levels=levels)


@pytest.mark.parametrize(
    "allowance",
    [
        {"name": "", "amount": 100},
        {"name": "Petrol", "amount": 0},
        {"name": "Petrol", "amount": -5},
    ],
)
def test_invalid_allowance_rejected(allowance):
    svc = SalaryConfigService(FakeSalaryConfigs())

    with pytest.raises(InvalidInput):
        svc.save(base_salary=15000, commission_per_packet=10, allowances=[allowance])


def test_negative_amounts_rejected():
    svc = SalaryConfigService(FakeSalaryConfigs())

    with pytest.raises(InvalidInput):
        svc.save(base_salary=-1, commission_per_packet=10)
    with pytest.raises(InvalidInput):
        svc.save(base_salary=15000, commission_per_packet=-0.5)


def test_level_target_must_be_whole_non_negative():
    svc = SalaryConfigService(FakeSalaryConfigs())

    with pytest.raises(InvalidInput):
        svc.save(
            base_salary=15000,
            commission_per_packet=10,
            target_levels=[{"levelName": "Bronze", "targetPackets": -10, "incentiveAmount": 500}],
        )


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", float("nan"), float("inf")])
def test_non_finite_amounts_rejected(value):
    svc = SalaryConfigService(FakeSalaryConfigs())

    with pytest.raises(InvalidInput):
        svc.save(base_salary=value, commission_per_packet=10)
    with pytest.raises(InvalidInput):
        svc.save(base_salary=15000, commission_per_packet=value)
    with pytest.raises(InvalidInput):
        svc.save(base_salary=15000, commission_per_packet=10, allowances=[{"name": "Petrol", "amount": value}])


def test_stored_level_with_malformed_target_is_read_leniently():
    assert TargetLevel.from_dict({"levelName": "Bronze", "targetPackets": "150.0", "incentiveAmount": 500}).target_packets == 150
    assert TargetLevel.from_dict({"levelName": "Bronze", "targetPackets": "abc", "incentiveAmount": 500}).target_packets == 0
    assert TargetLevel.from_dict({"levelName": "Bronze", "targetPackets": "NaN"}).target_packets == 0
    assert TargetLevel.from_dict({"levelName": "Bronze"}).target_packets == 0
