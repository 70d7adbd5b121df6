from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.time_utils import minutes_to_hours_string
from ..employees.model import Employee


@dataclass(frozen=True)
class SalaryReport:
    """Salary breakdown for one employee-month. Currency fields are rounded to 0.01."""

    employee: Employee
    year: int
    month: int
    total_working_days: int
    fn_present_days: int
    an_present_days: int
    per_day_rate: Decimal
    hourly_rate: Decimal
    fn_salary: Decimal
    an_salary: Decimal
    basic_salary: Decimal
    ot_minutes: int
    ot_hours: Decimal
    ot_amount: Decimal
    total_allowances: Decimal
    permission_hours: Decimal
    excess_permission_deduction: Decimal
    esa_pf_deduction: Decimal
    net_salary: Decimal

    @property
    def total_present_sessions(self) -> int:
        return self.fn_present_days + self.an_present_days

    @property
    def ot_duration_text(self) -> str:
        return minutes_to_hours_string(self.ot_minutes)

    @property
    def total_deductions(self) -> Decimal:
        return self.excess_permission_deduction + self.esa_pf_deduction

    def to_row(self) -> dict:
        """Plain export row (salary sheet columns)."""
        return {
            "Employee ID": self.employee.employee_code,
            "Name": self.employee.name,
            "Type": self.employee.employee_type.value,
            "Working Days": self.total_working_days,
            "FN Present": self.fn_present_days,
            "AN Present": self.an_present_days,
            "Total Sessions": self.total_present_sessions,
            "FN Salary": f"{self.fn_salary:.2f}",
            "AN Salary": f"{self.an_salary:.2f}",
            "Basic Salary": f"{self.basic_salary:.2f}",
            "OT Hours": f"{self.ot_hours:.2f}",
            "OT Amount": f"{self.ot_amount:.2f}",
            "Allowances": f"{self.total_allowances:.2f}",
            "Permission Hours": f"{self.permission_hours:.2f}",
            "Excess Permission Deduction": f"{self.excess_permission_deduction:.2f}",
            "ESA/PF Deduction": f"{self.esa_pf_deduction:.2f}",
            "Net Salary": f"{self.net_salary:.2f}",
        }


@dataclass(frozen=True)
class PayrollSummary:
    total_employees: int
    total_basic_salary: Decimal
    total_ot_amount: Decimal
    total_allowances: Decimal
    total_deductions: Decimal
    total_net_salary: Decimal
    average_attendance: Decimal
