from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ...allowances.model import Allowance
from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import in_month
from ...common.time_utils import decimal_hours_to_minutes
from ...common.validators import require_month
from ...core.constants import CURRENCY_QUANTUM
from ...core.enums import AllowanceTreatment, OtFallback, SessionStatus
from ...core.policy import DEFAULT_POLICY, PayrollPolicy
from ...employees.model import Employee
from ...holidays.calendar import get_working_days_in_month
from ...holidays.model import Holiday
from ...overtime.calculator import DurationCalculator
from ..model import SalaryReport
from .base import SalaryCalculator

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass
class _MonthTally:
    fn_present: int = 0
    an_present: int = 0
    manual_ot_minutes: int = 0
    calculated_ot_minutes: int = 0
    permission_hours: Decimal = ZERO

    def ot_minutes(self, fallback: OtFallback) -> int:
        if fallback == OtFallback.MONTHLY:
            # calculated OT only when nobody entered OT by hand this month
            return self.manual_ot_minutes or self.calculated_ot_minutes
        return self.manual_ot_minutes + self.calculated_ot_minutes


class StandardSalaryCalculator(SalaryCalculator):
    """Session-based salary: each present half-day earns half the per-day rate.

    OT is paid at `ot_multiplier` x (per-day rate / hours per day). Staff
    lose the hourly rate for each permission hour above the free allowance.
    ESA/PF is taken from basic + OT only.
    """

    def __init__(self, policy: Optional[PayrollPolicy] = None, *, durations: Optional[DurationCalculator] = None):
        self._policy = policy or DEFAULT_POLICY
        self._durations = durations or DurationCalculator.for_policy(self._policy)

    @property
    def policy(self) -> PayrollPolicy:
        return self._policy

    def _tally(self, records: Iterable[AttendanceRecord]) -> _MonthTally:
        tally = _MonthTally()
        seen_dates = set()
        for r in records:
            if r.work_date in seen_dates:
                logger.warning("Duplicate attendance for employee %s on %s", r.employee_id, r.work_date)
            seen_dates.add(r.work_date)

            if r.fn_status == SessionStatus.PRESENT:
                tally.fn_present += 1
            if r.an_status == SessionStatus.PRESENT:
                tally.an_present += 1

            if r.has_manual_ot:
                tally.manual_ot_minutes += decimal_hours_to_minutes(r.ot_hours)
            elif r.has_actual_times:
                tally.calculated_ot_minutes += self._durations.calculate(
                    r.actual_start_time, r.actual_end_time
                ).ot_minutes

            tally.permission_hours += Decimal(str(r.permission_hours or 0))
        return tally

    def calculate(
        self,
        employee: Employee,
        attendance: Iterable[AttendanceRecord],
        allowances: Iterable[Allowance],
        holidays: Iterable[Holiday],
        year: int,
        month: int,
    ) -> SalaryReport:
        month = require_month(month)
        policy = self._policy

        scope = employee.employee_type if policy.holiday_scope_by_employee_type else None
        total_working_days = get_working_days_in_month(year, month, holidays, scope)

        # filter on the record's own date, not when it was entered
        month_attendance = [
            a for a in attendance if a.employee_id == employee.employee_id and in_month(a.work_date, year, month)
        ]
        month_allowances = [
            a for a in allowances if a.employee_id == employee.employee_id and in_month(a.work_date, year, month)
        ]

        tally = self._tally(month_attendance)
        ot_minutes = tally.ot_minutes(policy.ot_fallback)

        per_day_rate = employee.per_day_rate(total_working_days)
        half_day_rate = per_day_rate / 2
        hourly_rate = per_day_rate / policy.hours_per_day

        fn_salary = _money(tally.fn_present * half_day_rate)
        an_salary = _money(tally.an_present * half_day_rate)
        basic_salary = fn_salary + an_salary

        ot_hours = Decimal(ot_minutes) / 60
        ot_amount = _money(ot_hours * hourly_rate * policy.ot_multiplier)

        total_allowances = _money(sum((Decimal(a.amount) for a in month_allowances), ZERO))

        excess_permission_deduction = _money(ZERO)
        if employee.deducts_excess_permission and tally.permission_hours > policy.free_permission_hours:
            excess_hours = tally.permission_hours - policy.free_permission_hours
            excess_permission_deduction = _money(excess_hours * hourly_rate)

        esa_pf_deduction = _money(ZERO)
        if employee.esa_pf:
            esa_pf_deduction = _money((basic_salary + ot_amount) * policy.esa_pf_rate)

        if policy.allowance_treatment == AllowanceTreatment.ADDITION:
            allowance_effect = total_allowances
        else:
            allowance_effect = -total_allowances

        net_salary = basic_salary + ot_amount + allowance_effect - excess_permission_deduction - esa_pf_deduction

        logger.debug(
            "Salary %s %04d-%02d: days=%s fn=%s an=%s ot_min=%s net=%s",
            employee.employee_code,
            int(year),
            month + 1,
            total_working_days,
            tally.fn_present,
            tally.an_present,
            ot_minutes,
            net_salary,
        )

        return SalaryReport(
            employee=employee,
            year=int(year),
            month=month,
            total_working_days=total_working_days,
            fn_present_days=tally.fn_present,
            an_present_days=tally.an_present,
            per_day_rate=_money(per_day_rate),
            hourly_rate=_money(hourly_rate),
            fn_salary=fn_salary,
            an_salary=an_salary,
            basic_salary=basic_salary,
            ot_minutes=ot_minutes,
            ot_hours=_money(ot_hours),
            ot_amount=ot_amount,
            total_allowances=total_allowances,
            permission_hours=tally.permission_hours,
            excess_permission_deduction=excess_permission_deduction,
            esa_pf_deduction=esa_pf_deduction,
            net_salary=net_salary,
        )


_DEFAULT_CALCULATOR = StandardSalaryCalculator(DEFAULT_POLICY)


def calculate_salary(
    employee: Employee,
    attendance: Iterable[AttendanceRecord],
    allowances: Iterable[Allowance],
    holidays: Iterable[Holiday],
    year: int,
    month: int,
    *,
    policy: Optional[PayrollPolicy] = None,
) -> SalaryReport:
    calculator = StandardSalaryCalculator(policy) if policy else _DEFAULT_CALCULATOR
    return calculator.calculate(employee, attendance, allowances, holidays, year, month)
