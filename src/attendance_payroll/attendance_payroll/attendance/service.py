from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.time_utils import decimal_hours_to_minutes, minutes_to_decimal_hours
from ..core.enums import DayStatus
from ..core.policy import DEFAULT_POLICY
from ..employees.repository import EmployeeRepository
from ..overtime.calculator import ZERO_DURATION, DurationCalculator
from ..shifts.repository import ShiftRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyAttendanceRow:
    employee_code: str
    employee_name: str
    employee_type: str
    shift_name: str
    fn_status: str
    an_status: str
    status: str
    actual_start_time: str
    actual_end_time: str
    working_duration: str
    ot_duration: str
    ot_hours: float
    permission_hours: float


@dataclass(frozen=True)
class DailyStats:
    total: int
    present: int
    full_day: int
    half_day: int
    absent: int
    total_ot_hours: float


@dataclass(frozen=True)
class DailySheet:
    work_date: date
    rows: list[DailyAttendanceRow]
    stats: DailyStats


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        shifts: Optional[ShiftRepository] = None,
        *,
        durations: Optional[DurationCalculator] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._shifts = shifts
        self._durations = durations or DurationCalculator.for_policy(DEFAULT_POLICY)

    def effective_ot_minutes(self, record: AttendanceRecord) -> int:
        """Manual OT when entered, otherwise OT from the actual clock times."""
        if record.has_manual_ot:
            return decimal_hours_to_minutes(record.ot_hours)
        if record.has_actual_times:
            return self._durations.calculate(record.actual_start_time, record.actual_end_time).ot_minutes
        return 0

    def _shift_name(self, shift_id: Optional[str]) -> str:
        if not shift_id or not self._shifts:
            return "-"
        shift = self._shifts.get_by_id(shift_id)
        return shift.name if shift else "-"

    def daily_sheet(self, work_date: date) -> DailySheet:
        rows: list[DailyAttendanceRow] = []
        total_ot_minutes = 0
        counts = {DayStatus.FULL_DAY: 0, DayStatus.HALF_DAY: 0, DayStatus.ABSENT: 0}

        for r in self._attendance.list_for_date(work_date):
            employee = self._employees.get_by_id(r.employee_id)
            if not employee:
                logger.warning("Attendance %s refers to unknown employee %s", r.attendance_id, r.employee_id)
                continue

            duration = (
                self._durations.calculate(r.actual_start_time, r.actual_end_time)
                if r.has_actual_times
                else ZERO_DURATION
            )
            ot_minutes = self.effective_ot_minutes(r)
            total_ot_minutes += ot_minutes
            counts[r.status] += 1

            rows.append(
                DailyAttendanceRow(
                    employee_code=employee.employee_code,
                    employee_name=employee.name,
                    employee_type=employee.employee_type.value,
                    shift_name=self._shift_name(r.shift_id or employee.shift_id),
                    fn_status=r.fn_status.value,
                    an_status=r.an_status.value,
                    status=r.status.value,
                    actual_start_time=r.actual_start_time or "",
                    actual_end_time=r.actual_end_time or "",
                    working_duration=duration.working_duration_text if r.has_actual_times else "",
                    ot_duration=duration.ot_duration_text if r.has_actual_times else "",
                    ot_hours=minutes_to_decimal_hours(ot_minutes),
                    permission_hours=float(r.permission_hours or 0),
                )
            )

        rows.sort(key=lambda x: x.employee_code)
        stats = DailyStats(
            total=len(rows),
            present=counts[DayStatus.FULL_DAY] + counts[DayStatus.HALF_DAY],
            full_day=counts[DayStatus.FULL_DAY],
            half_day=counts[DayStatus.HALF_DAY],
            absent=counts[DayStatus.ABSENT],
            total_ot_hours=minutes_to_decimal_hours(total_ot_minutes),
        )
        return DailySheet(work_date=work_date, rows=rows, stats=stats)
