from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from ..core.constants import ISO_DATE_FORMAT
from ..core.enums import Period
from ..core.exceptions import InvalidInput


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidInput(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= int(month) <= 12:
        raise InvalidInput(f"Invalid month: {month}")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months, carrying the year."""
    index = int(year) * 12 + (int(month) - 1) + int(delta)
    return index // 12, index % 12 + 1


def week_bounds(value: date) -> tuple[date, date]:
    """Monday..Sunday week containing value (a Sunday belongs to the week that started 6 days earlier)."""
    start = value - timedelta(days=value.weekday())
    return start, start + timedelta(days=6)


def iter_dates(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def require_range(start: date, end: date) -> tuple[date, date]:
    if start > end:
        raise InvalidInput(f"Start date {format_iso_date(start)} is after end date {format_iso_date(end)}")
    return start, end


def resolve_range(
    period: Period | str,
    *,
    anchor: Optional[date] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> tuple[date, date]:
    """Turn a period preset (or an explicit custom range) into inclusive bounds."""

    try:
        period = Period(period)
    except ValueError:
        raise InvalidInput(f"Unknown period: {period!r}")

    anchor = anchor or today_local()
    if period == Period.DAY:
        return anchor, anchor
    if period == Period.WEEK:
        return week_bounds(anchor)
    if period == Period.MONTH:
        return month_bounds(anchor.year, anchor.month)

    if start is None or end is None:
        raise InvalidInput("Custom range requires both start and end dates")
    return require_range(start, end)
