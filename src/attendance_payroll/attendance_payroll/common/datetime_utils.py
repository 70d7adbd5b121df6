from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Iterator

from ..core.exceptions import ValidationError
from .validators import require_month


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def as_date(value) -> date:
    """Accept a date, a datetime or an ISO string (date part only)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value)[:10])
    except ValueError:
        raise ValidationError(f"Ngày không hợp lệ (YYYY-MM-DD): {value!r}")


def days_in_month(year: int, month: int) -> int:
    """`month` is zero-based, like the rest of the calendar API."""
    return calendar.monthrange(int(year), require_month(month) + 1)[1]


def iter_month_days(year: int, month: int) -> Iterator[date]:
    for day in range(1, days_in_month(year, month) + 1):
        yield date(int(year), int(month) + 1, day)


def in_month(value: date, year: int, month: int) -> bool:
    return value.year == int(year) and value.month == int(month) + 1
