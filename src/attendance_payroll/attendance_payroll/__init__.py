"""Attendance payroll package.

Pure calculation library organized by feature modules (attendance, overtime,
holidays, payroll, ...): raw attendance/allowance/holiday records in, working
duration, OT and monthly salary reports out. No I/O happens here; storage and
UI live outside and pass plain records in.
"""

from .holidays.calendar import get_working_days_in_month, is_working_day
from .overtime.calculator import calculate_attendance_duration
from .payroll.calculator.standard_calculator import calculate_salary

__all__ = [
    "calculate_attendance_duration",
    "calculate_salary",
    "get_working_days_in_month",
    "is_working_day",
]
