from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Optional, Union

from ..core.enums import EmployeeType
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class _EmployeeBase:
    employee_id: str
    name: str
    employee_code: str
    esa_pf: bool = False
    shift_id: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class StaffEmployee(_EmployeeBase):
    """Thực thể miền (domain): Nhân viên văn phòng, hưởng lương tháng cố định.

    Lương ngày = lương tháng / số ngày làm việc của tháng. Được miễn
    một số giờ xin phép mỗi tháng (xem `PayrollPolicy.free_permission_hours`).
    """

    employee_type: ClassVar[EmployeeType] = EmployeeType.STAFF
    deducts_excess_permission: ClassVar[bool] = True

    monthly_salary: Decimal = Decimal("0")

    def per_day_rate(self, total_working_days: int) -> Decimal:
        if total_working_days <= 0:
            raise ConfigurationError(
                f"Tháng không có ngày làm việc, không thể tính lương ngày cho {self.employee_code}"
            )
        return Decimal(self.monthly_salary) / Decimal(total_working_days)


@dataclass(frozen=True)
class LabourEmployee(_EmployeeBase):
    """Thực thể miền (domain): Công nhân, hưởng lương ngày cố định."""

    employee_type: ClassVar[EmployeeType] = EmployeeType.LABOUR
    deducts_excess_permission: ClassVar[bool] = False

    daily_salary: Decimal = Decimal("0")

    def per_day_rate(self, total_working_days: int) -> Decimal:
        return Decimal(self.daily_salary)


Employee = Union[StaffEmployee, LabourEmployee]
