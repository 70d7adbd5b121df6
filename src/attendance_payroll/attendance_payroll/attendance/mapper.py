from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import as_date
from ..common.records import as_decimal, optional_text, record_id
from ..common.time_utils import time_string_to_decimal_hours
from ..core.enums import SessionStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord


def _session(value: Any, field_name: str) -> SessionStatus:
    try:
        return SessionStatus(str(value or SessionStatus.ABSENT.value).lower())
    except ValueError:
        raise ValidationError(f"{field_name} không hợp lệ: {value!r}")


def attendance_from_record(record: Mapping[str, Any]) -> AttendanceRecord:
    """Map a stored attendance document. `otHours` may be a number or text like "1h 15m"."""
    ot_hours = time_string_to_decimal_hours(record.get("otHours"))
    return AttendanceRecord(
        attendance_id=record_id(record),
        employee_id=str(record.get("employeeId", "")),
        work_date=as_date(record["date"]),
        fn_status=_session(record.get("fnStatus"), "fnStatus"),
        an_status=_session(record.get("anStatus"), "anStatus"),
        ot_hours=ot_hours or None,
        permission_hours=as_decimal(record.get("permissionHours"), "permissionHours"),
        actual_start_time=optional_text(record.get("actualStartTime")),
        actual_end_time=optional_text(record.get("actualEndTime")),
        shift_id=optional_text(record.get("shiftId")),
    )
