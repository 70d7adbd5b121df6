from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..allowances.repository import AllowanceRepository
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import days_in_month
from ..common.validators import require_month
from ..employees.repository import EmployeeRepository
from ..holidays.repository import HolidayRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import PayrollSummary, SalaryReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    reports: list[SalaryReport]
    summary: PayrollSummary

    @property
    def rows(self) -> list[dict]:
        return [r.to_row() for r in self.reports]


class PayrollReportService:
    """Monthly payroll run: one salary report per active employee plus totals."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        allowances: AllowanceRepository,
        holidays: HolidayRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._allowances = allowances
        self._holidays = holidays
        self._calculator = calculator or StandardSalaryCalculator()

    def build_salary_report(self, *, year: int, month: int, employee_id: Optional[str] = None) -> ReportData:
        month = require_month(month)
        start = date(int(year), month + 1, 1)
        end = date(int(year), month + 1, days_in_month(year, month))

        if employee_id is not None:
            employee = self._employees.get_by_id(employee_id)
            employees = [employee] if employee else []
        else:
            employees = list(self._employees.list_active())

        attendance = list(self._attendance.list_between(start_date=start, end_date=end, employee_id=employee_id))
        allowances = list(self._allowances.list_between(start_date=start, end_date=end, employee_id=employee_id))
        holidays = list(self._holidays.list_all())

        reports = [
            self._calculator.calculate(e, attendance, allowances, holidays, year, month) for e in employees
        ]
        reports.sort(key=lambda r: r.employee.employee_code)

        logger.info("Payroll %04d-%02d: %d employee(s)", int(year), month + 1, len(reports))
        return ReportData(reports=reports, summary=summarize(reports))


def summarize(reports: list[SalaryReport]) -> PayrollSummary:
    zero = Decimal("0.00")
    possible_sessions = sum(r.total_working_days * 2 for r in reports)
    present_sessions = sum(r.total_present_sessions for r in reports)

    if possible_sessions:
        average_attendance = (Decimal(present_sessions) * 100 / Decimal(possible_sessions)).quantize(Decimal("0.01"))
    else:
        average_attendance = zero

    return PayrollSummary(
        total_employees=len(reports),
        total_basic_salary=sum((r.basic_salary for r in reports), zero),
        total_ot_amount=sum((r.ot_amount for r in reports), zero),
        total_allowances=sum((r.total_allowances for r in reports), zero),
        total_deductions=sum((r.total_deductions for r in reports), zero),
        total_net_salary=sum((r.net_salary for r in reports), zero),
        average_attendance=average_attendance,
    )
