from decimal import Decimal

import pytest

from src.courier_payroll.courier_payroll.core.exceptions import InvalidInput
from src.courier_payroll.courier_payroll.salary.calculator.tiered_calculator import (
    TieredSalaryCalculator,
    select_level,
    target_for_level,
)
from src.courier_payroll.courier_payroll.salary.model import Allowance, SalaryConfiguration, TargetLevel
from tests.fakes import scenario_config


def test_mid_tier_scenario():
    salary = TieredSalaryCalculator().compute(150, scenario_config())

    assert salary.base_salary == 15000
    assert salary.allowances == 1000
    assert salary.commission == 1500
    assert salary.achievement_bonus == 500
    assert salary.achievement_level == "Bronze"
    assert salary.total_salary == 18000


def test_top_tier_scenario():
    salary = TieredSalaryCalculator().compute(250, scenario_config())

    assert salary.achievement_level == "Silver"
    assert salary.achievement_bonus == 1200
    assert salary.total_salary == 15000 + 1000 + 2500 + 1200


def test_below_every_threshold():
    salary = TieredSalaryCalculator().compute(50, scenario_config())

    assert salary.achievement_level == "None"
    assert salary.achievement_bonus == 0
    assert salary.total_salary == 16500


def test_threshold_is_inclusive():
    assert TieredSalaryCalculator().compute(100, scenario_config()).achievement_level == "Bronze"
    assert TieredSalaryCalculator().compute(199, scenario_config()).achievement_level == "Bronze"
    assert TieredSalaryCalculator().compute(200, scenario_config()).achievement_level == "Silver"


def test_only_highest_tier_bonus_is_paid():
    salary = TieredSalaryCalculator().compute(1000, scenario_config())

    assert salary.achievement_bonus == 1200


def test_total_is_sum_of_parts():
    calc = TieredSalaryCalculator()
    for packets in (0, 1, 99, 100, 150, 200, 999):
        s = calc.compute(packets, scenario_config())
        assert s.total_salary == s.base_salary + s.allowances + s.commission + s.achievement_bonus


def test_level_order_in_config_does_not_matter():
    config = scenario_config()
    reversed_config = SalaryConfiguration(
        base_salary=config.base_salary,
        commission_per_packet=config.commission_per_packet,
        allowances=config.allowances,
        target_levels=tuple(reversed(config.target_levels)),
    )

    assert TieredSalaryCalculator().compute(250, reversed_config).achievement_level == "Silver"


def test_shared_threshold_prefers_larger_incentive():
    levels = (
        TargetLevel(level_name="Gold", target_packets=100, incentive_amount=Decimal("300")),
        TargetLevel(level_name="Platinum", target_packets=100, incentive_amount=Decimal("700")),
    )

    assert select_level(120, levels).level_name == "Platinum"


def test_shared_threshold_and_incentive_keeps_input_order():
    levels = (
        TargetLevel(level_name="First", target_packets=100, incentive_amount=Decimal("300")),
        TargetLevel(level_name="Second", target_packets=100, incentive_amount=Decimal("300")),
    )

    assert select_level(100, levels).level_name == "First"


def test_no_levels_and_no_allowances():
    config = SalaryConfiguration(base_salary=Decimal("12000"), commission_per_packet=Decimal("5"))
    salary = TieredSalaryCalculator().compute(10, config)

    assert salary.allowances == 0
    assert salary.achievement_level == "None"
    assert salary.total_salary == 12050


def test_allowances_are_all_added():
    config = SalaryConfiguration(
        base_salary=Decimal("0"),
        commission_per_packet=Decimal("0"),
        allowances=(
            Allowance(name="Petrol", amount=Decimal("800")),
            Allowance(name="Phone", amount=Decimal("250.50")),
        ),
    )

    assert TieredSalaryCalculator().compute(0, config).allowances == Decimal("1050.50")


def test_commission_rounds_to_smallest_currency_unit():
    config = SalaryConfiguration(base_salary=Decimal("0"), commission_per_packet=Decimal("0.335"))

    assert TieredSalaryCalculator().compute(3, config).commission == Decimal("1.01")


def test_negative_packets_rejected():
    with pytest.raises(InvalidInput):
        TieredSalaryCalculator().compute(-1, scenario_config())


def test_progress_toward_next_level():
    progress = TieredSalaryCalculator().progress(150, scenario_config())

    assert progress.next_level_name == "Silver"
    assert progress.remaining == 50
    assert progress.percent == Decimal("75.00")


def test_progress_before_first_level():
    progress = TieredSalaryCalculator().progress(50, scenario_config())

    assert progress.next_level_name == "Bronze"
    assert progress.remaining == 50
    assert progress.percent == 50


def test_progress_is_full_at_top_level():
    progress = TieredSalaryCalculator().progress(250, scenario_config())

    assert progress.next_level_name is None
    assert progress.percent == 100


def test_progress_without_levels_is_zero():
    config = SalaryConfiguration(base_salary=Decimal("1"), commission_per_packet=Decimal("1"))

    assert TieredSalaryCalculator().progress(500, config).percent == 0


def test_target_for_level():
    assert target_for_level(scenario_config(), "Silver") == 200
    assert target_for_level(scenario_config(), "None") is None
