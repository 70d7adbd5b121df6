from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import DayStatus, SessionStatus


def day_status(fn_status: SessionStatus, an_status: SessionStatus) -> DayStatus:
    fn = fn_status == SessionStatus.PRESENT
    an = an_status == SessionStatus.PRESENT
    if fn and an:
        return DayStatus.FULL_DAY
    if fn or an:
        return DayStatus.HALF_DAY
    return DayStatus.ABSENT


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công theo ngày.

    Một bản ghi cho mỗi (nhân viên, ngày). `ot_hours` là số giờ OT nhập tay,
    nếu có và khác 0 thì được ưu tiên hơn OT tính từ giờ vào/ra thực tế.
    """

    attendance_id: str
    employee_id: str
    work_date: date
    fn_status: SessionStatus = SessionStatus.ABSENT
    an_status: SessionStatus = SessionStatus.ABSENT
    ot_hours: Optional[Decimal] = None
    permission_hours: Decimal = Decimal("0")
    actual_start_time: Optional[str] = None
    actual_end_time: Optional[str] = None
    shift_id: Optional[str] = None

    @property
    def status(self) -> DayStatus:
        return day_status(self.fn_status, self.an_status)

    @property
    def has_manual_ot(self) -> bool:
        return bool(self.ot_hours)

    @property
    def has_actual_times(self) -> bool:
        start = (self.actual_start_time or "").strip()
        end = (self.actual_end_time or "").strip()
        return bool(start) and bool(end)
