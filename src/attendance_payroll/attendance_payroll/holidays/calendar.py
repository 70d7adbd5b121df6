"""Working-day rules: every day except Sundays and holidays is a working day.

There is no six-day-week concept; Saturdays always count.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import iter_month_days
from ..core.enums import EmployeeType
from .model import Holiday

SUNDAY = 6


def is_sunday(value: date) -> bool:
    return value.weekday() == SUNDAY


def _matches(holiday: Holiday, value: date) -> bool:
    d = holiday.holiday_date
    if d.month != value.month or d.day != value.day:
        return False
    return holiday.is_recurring or d.year == value.year


def is_holiday(value: date, holidays: Iterable[Holiday], employee_type: Optional[EmployeeType] = None) -> bool:
    """True if any holiday falls on `value`.

    When `employee_type` is given, holidays scoped to the other employee
    type are ignored.
    """
    for h in holidays:
        if employee_type is not None and not h.applicable_to.covers(employee_type):
            continue
        if _matches(h, value):
            return True
    return False


def is_working_day(value: date, holidays: Iterable[Holiday], employee_type: Optional[EmployeeType] = None) -> bool:
    return not is_sunday(value) and not is_holiday(value, holidays, employee_type)


def get_working_days_in_month(
    year: int,
    month: int,
    holidays: Iterable[Holiday],
    employee_type: Optional[EmployeeType] = None,
) -> int:
    """Working days in a month; `month` is zero-based (0 = January)."""
    holidays = list(holidays)
    return sum(1 for d in iter_month_days(year, month) if is_working_day(d, holidays, employee_type))
