from __future__ import annotations

from typing import Any, Mapping

from ..common.records import as_decimal, optional_text, record_id
from ..core.enums import EmployeeType
from ..core.exceptions import ValidationError
from .model import Employee, LabourEmployee, StaffEmployee


def employee_from_record(record: Mapping[str, Any]) -> Employee:
    """Map a stored employee document to the staff/labour variant.

    Older documents only carry `salaryPerDay` / `salaryPerMonth`; they are
    read as the daily wage (labour) or the monthly salary (staff).
    """
    try:
        employee_type = EmployeeType(str(record.get("employeeType", "")).lower())
    except ValueError:
        raise ValidationError(f"Loại nhân viên không hợp lệ: {record.get('employeeType')!r}")

    common = dict(
        employee_id=record_id(record),
        name=str(record.get("name", "")),
        employee_code=str(record.get("employeeId", "")),
        esa_pf=bool(record.get("esaPf", False)),
        shift_id=optional_text(record.get("shiftId")),
        is_active=bool(record.get("isActive", True)),
    )

    if employee_type == EmployeeType.STAFF:
        monthly = record.get("monthlySalary")
        if monthly is None:
            monthly = record.get("salaryPerMonth")
        return StaffEmployee(monthly_salary=as_decimal(monthly, "monthlySalary"), **common)

    daily = record.get("dailySalary")
    if daily is None:
        daily = record.get("salaryPerDay")
    return LabourEmployee(daily_salary=as_decimal(daily, "dailySalary"), **common)
