from datetime import date

import pytest

from src.courier_payroll.courier_payroll.common.datetime_utils import (
    iter_dates,
    month_bounds,
    parse_iso_date,
    resolve_range,
    shift_month,
    week_bounds,
)
from src.courier_payroll.courier_payroll.common.money import to_cell, to_money
from src.courier_payroll.courier_payroll.core.exceptions import InvalidInput


def test_parse_iso_date():
    assert parse_iso_date("2024-03-05") == date(2024, 3, 5)
    with pytest.raises(InvalidInput):
        parse_iso_date("05/03/2024")
    with pytest.raises(InvalidInput):
        parse_iso_date(None)


def test_month_bounds_handles_leap_years():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2023, 2) == (date(2023, 2, 1), date(2023, 2, 28))
    with pytest.raises(InvalidInput):
        month_bounds(2024, 13)


def test_shift_month_carries_the_year():
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2024, 12, 1) == (2025, 1)


def test_sunday_belongs_to_the_week_starting_six_days_earlier():
    assert week_bounds(date(2024, 3, 10)) == (date(2024, 3, 4), date(2024, 3, 10))
    assert week_bounds(date(2024, 3, 4)) == (date(2024, 3, 4), date(2024, 3, 10))


def test_iter_dates_is_inclusive():
    assert list(iter_dates(date(2024, 2, 28), date(2024, 3, 1))) == [
        date(2024, 2, 28),
        date(2024, 2, 29),
        date(2024, 3, 1),
    ]


def test_resolve_range_presets():
    anchor = date(2024, 3, 13)

    assert resolve_range("day", anchor=anchor) == (anchor, anchor)
    assert resolve_range("week", anchor=anchor) == (date(2024, 3, 11), date(2024, 3, 17))
    assert resolve_range("month", anchor=anchor) == (date(2024, 3, 1), date(2024, 3, 31))


def test_resolve_custom_range():
    assert resolve_range("custom", start=date(2024, 3, 1), end=date(2024, 3, 3)) == (date(2024, 3, 1), date(2024, 3, 3))

    with pytest.raises(InvalidInput):
        resolve_range("custom", start=date(2024, 3, 3), end=date(2024, 3, 1))
    with pytest.raises(InvalidInput):
        resolve_range("custom", start=date(2024, 3, 3))
    with pytest.raises(InvalidInput):
        resolve_range("fortnight", anchor=date(2024, 3, 3))


def test_to_money_treats_missing_values_as_zero():
    assert to_money(None) == 0
    assert to_money("") == 0
    assert to_money("abc") == 0
    assert str(to_money("12.50")) == "12.50"


def test_to_cell():
    assert to_cell(to_money("520")) == 520
    assert isinstance(to_cell(to_money("520.00")), int)
    assert to_cell(to_money("3.25")) == 3.25
    assert to_cell("Total") == "Total"
