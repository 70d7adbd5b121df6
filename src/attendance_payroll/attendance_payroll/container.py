from __future__ import annotations

from dataclasses import dataclass

from .allowances.repository import AllowanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.policy import PayrollPolicy
from .employees.repository import EmployeeRepository
from .holidays.repository import HolidayRepository
from .overtime.calculator import DurationCalculator
from .payroll.calculator.standard_calculator import StandardSalaryCalculator
from .payroll.service import PayrollReportService
from .shifts.repository import ShiftRepository


@dataclass(frozen=True)
class Container:
    policy: PayrollPolicy

    duration_calculator: DurationCalculator
    salary_calculator: StandardSalaryCalculator

    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService


def build_container(
    *,
    policy: PayrollPolicy,
    employees: EmployeeRepository,
    attendance: AttendanceRepository,
    allowances: AllowanceRepository,
    holidays: HolidayRepository,
    shifts: ShiftRepository | None = None,
) -> Container:
    duration_calculator = DurationCalculator.for_policy(policy)
    salary_calculator = StandardSalaryCalculator(policy, durations=duration_calculator)

    attendance_service = AttendanceService(attendance, employees, shifts, durations=duration_calculator)
    payroll_report_service = PayrollReportService(
        employees,
        attendance,
        allowances,
        holidays,
        calculator=salary_calculator,
    )

    return Container(
        policy=policy,
        duration_calculator=duration_calculator,
        salary_calculator=salary_calculator,
        attendance_service=attendance_service,
        payroll_report_service=payroll_report_service,
    )
