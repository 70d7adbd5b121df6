from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import as_date
from ..common.records import record_id
from ..core.enums import ApplicableTo, HolidayType
from ..core.exceptions import ValidationError
from .model import Holiday


def holiday_from_record(record: Mapping[str, Any]) -> Holiday:
    try:
        holiday_type = HolidayType(str(record.get("type") or HolidayType.OTHER.value).lower())
        applicable_to = ApplicableTo(str(record.get("applicableTo") or ApplicableTo.BOTH.value).lower())
    except ValueError as exc:
        raise ValidationError(f"Ngày lễ không hợp lệ: {exc}")

    return Holiday(
        holiday_id=record_id(record),
        name=str(record.get("name", "")),
        holiday_date=as_date(record["date"]),
        is_recurring=bool(record.get("isRecurring", False)),
        holiday_type=holiday_type,
        applicable_to=applicable_to,
    )
