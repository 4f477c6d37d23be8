from datetime import date
from decimal import Decimal

import pytest

from src.courier_payroll.courier_payroll.company.model import CommonExpense, CompanySettings
from src.courier_payroll.courier_payroll.core.enums import EmployeeStatus
from src.courier_payroll.courier_payroll.core.exceptions import ConfigurationMissing, InvalidInput
from tests.fakes import FakeDeliveries, delivery, employee, make_container, scenario_config

ANIL = employee(1, "Anil Kumar")
BHAVNA = employee(2, "Bhavna Rao")
SETTINGS = CompanySettings(settings_id=1, profit_per_packet=Decimal("50"), profit_per_packet_pickup=Decimal("10"))


def march_rows():
    return FakeDeliveries(
        [
            delivery(1, 1, date(2024, 3, 1), 100, 10),
            delivery(2, 1, date(2024, 3, 2), 50),
            delivery(3, 2, date(2024, 3, 5), 30),
            delivery(4, 2, date(2024, 4, 1), 500),
        ]
    )


def rent():
    return [CommonExpense(expense_id=1, expense_date=date(2024, 3, 3), category="Rent", amount=Decimal("1000"))]


@pytest.fixture
def payroll():
    container = make_container(
        employees=[ANIL, BHAVNA],
        deliveries=march_rows(),
        config=scenario_config(),
        settings=SETTINGS,
        expenses=rent(),
    )
    return container.payroll_service


def test_standings_use_only_rows_inside_the_window(payroll):
    standings = payroll.standings(start=date(2024, 3, 1), end=date(2024, 3, 31))

    by_name = {s.employee.name: s for s in standings}
    assert by_name["Anil Kumar"].total_packets == 150
    assert by_name["Anil Kumar"].salary.total_salary == 18000
    assert by_name["Bhavna Rao"].total_packets == 30
    assert by_name["Bhavna Rao"].salary.total_salary == 16300


def test_standings_without_configuration_raise():
    container = make_container(employees=[ANIL], deliveries=march_rows())

    with pytest.raises(ConfigurationMissing):
        container.payroll_service.standings(start=date(2024, 3, 1), end=date(2024, 3, 31))


def test_inactive_employees_are_left_out():
    former = employee(3, "Chetan Das", status=EmployeeStatus.INACTIVE)
    container = make_container(employees=[ANIL, former], deliveries=march_rows(), config=scenario_config())

    standings = container.payroll_service.standings(start=date(2024, 3, 1), end=date(2024, 3, 31))

    assert [s.employee.employee_id for s in standings] == [1]


def test_month_profit(payroll):
    totals, profit = payroll.profit_between(start=date(2024, 3, 1), end=date(2024, 3, 31))

    assert totals.delivered == 180
    assert totals.pickuped == 10
    assert profit.revenue == Decimal("9100")
    assert profit.expenses == Decimal("1000")
    assert profit.employee_cost == Decimal("34300")
    assert profit.profit == Decimal("-26200")
    assert profit.margin == Decimal("-287.91")


def test_month_profit_without_configuration_has_no_employee_cost():
    container = make_container(employees=[ANIL, BHAVNA], deliveries=march_rows(), settings=SETTINGS, expenses=rent())

    _, profit = container.payroll_service.profit_between(start=date(2024, 3, 1), end=date(2024, 3, 31))

    assert profit.employee_cost == 0
    assert profit.profit == Decimal("8100")


def test_week_comparison(payroll):
    weeks = payroll.compare_weeks(date(2024, 3, 10))

    assert (weeks.current_start, weeks.current_end) == (date(2024, 3, 4), date(2024, 3, 10))
    assert (weeks.previous_start, weeks.previous_end) == (date(2024, 2, 26), date(2024, 3, 3))
    assert weeks.current.delivered == 30
    assert weeks.current_profit == Decimal("1500")
    assert weeks.previous_revenue == Decimal("7600")
    assert weeks.previous_profit == Decimal("6600")
    assert weeks.change == Decimal("-5100")
    assert weeks.change_percent == Decimal("-77.27")


def test_week_comparison_with_empty_previous_week(payroll):
    weeks = payroll.compare_weeks(date(2024, 2, 20))

    assert weeks.previous_profit == 0
    assert weeks.change_percent == 0


def test_dashboard(payroll):
    summary = payroll.dashboard(year=2024, month=3, today=date(2024, 3, 10))
    data = summary.to_dict()

    assert data["totalPacketsDelivered"] == 180
    assert data["activeEmployees"] == 2
    assert data["companyProfit"] == -26200.0
    assert data["weeks"]["current"]["start"] == "2024-03-04"
    assert data["weeks"]["previous"]["changePercent"] == -77.27


def test_employee_status_sorted_by_packets(payroll):
    rows = payroll.employee_status(year=2024, month=3)

    assert [r.employee.name for r in rows] == ["Anil Kumar", "Bhavna Rao"]
    assert rows[0].achievement_level == "Bronze"
    assert rows[0].progress.next_level_name == "Silver"


def test_employee_status_search_and_level_filter(payroll):
    assert [r.employee.name for r in payroll.employee_status(year=2024, month=3, search="BHAV")] == ["Bhavna Rao"]
    assert [r.employee.name for r in payroll.employee_status(year=2024, month=3, level="None")] == ["Bhavna Rao"]
    assert payroll.employee_status(year=2024, month=3, level="Silver") == []


def test_employee_status_sort_by_name_and_salary(payroll):
    by_name = payroll.employee_status(year=2024, month=3, sort_by="name")
    by_salary = payroll.employee_status(year=2024, month=3, sort_by="salary")

    assert [r.employee.employee_id for r in by_name] == [1, 2]
    assert by_salary[0].salary.total_salary >= by_salary[1].salary.total_salary


def test_employee_status_rejects_unknown_sort(payroll):
    with pytest.raises(InvalidInput):
        payroll.employee_status(year=2024, month=3, sort_by="age")


def test_employee_status_is_empty_without_configuration():
    container = make_container(employees=[ANIL], deliveries=march_rows())

    assert container.payroll_service.employee_status(year=2024, month=3) == []


def test_standing_to_dict(payroll):
    row = payroll.employee_status(year=2024, month=3)[0].to_dict()

    assert row["totalPackets"] == 150
    assert row["salary"]["totalSalary"] == 18000.0
    assert row["nextLevel"] == {"name": "Silver", "remaining": 50}
    assert row["progress"] == 75.0


def test_dashboard_month_navigation_wraps_the_year():
    container = make_container(employees=[ANIL], config=scenario_config(), settings=SETTINGS)

    january = container.payroll_service.dashboard(year=2024, month=1, today=date(2024, 1, 10)).to_dict()
    december = container.payroll_service.dashboard(year=2024, month=12, today=date(2024, 12, 10)).to_dict()

    assert january["previousMonth"] == {"year": 2023, "month": 12}
    assert january["nextMonth"] == {"year": 2024, "month": 2}
    assert december["nextMonth"] == {"year": 2025, "month": 1}
