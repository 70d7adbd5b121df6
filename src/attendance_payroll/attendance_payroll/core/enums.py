from __future__ import annotations

from enum import Enum


class EmployeeType(str, Enum):
    """Loại nhân viên: quyết định cách tính lương theo ngày."""

    STAFF = "staff"
    LABOUR = "labour"


class ApplicableTo(str, Enum):
    """Phạm vi áp dụng của ca làm việc / ngày lễ."""

    STAFF = "staff"
    LABOUR = "labour"
    BOTH = "both"

    def covers(self, employee_type: EmployeeType) -> bool:
        return self is ApplicableTo.BOTH or self.value == employee_type.value


class SessionStatus(str, Enum):
    """Trạng thái một buổi (FN = sáng, AN = chiều)."""

    PRESENT = "present"
    ABSENT = "absent"


class DayStatus(str, Enum):
    FULL_DAY = "Full Day"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"


class AllowanceType(str, Enum):
    FOOD = "food"
    ADVANCE = "advance"


class HolidayType(str, Enum):
    NATIONAL = "national"
    RELIGIOUS = "religious"
    COMPANY = "company"
    OTHER = "other"


class AllowanceTreatment(str, Enum):
    """How the month's allowances enter net salary."""

    ADDITION = "addition"
    DEDUCTION = "deduction"


class OtFallback(str, Enum):
    """Granularity of the manual-OT / calculated-OT fallback."""

    PER_RECORD = "per_record"
    MONTHLY = "monthly"


class OvertimeRuleKind(str, Enum):
    FLAT = "flat"
    THRESHOLD = "threshold"
