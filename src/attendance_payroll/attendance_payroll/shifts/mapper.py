from __future__ import annotations

from typing import Any, Mapping

from ..common.records import as_decimal, record_id
from ..common.time_utils import parse_time_to_minutes
from ..core.enums import ApplicableTo
from ..core.exceptions import ValidationError
from .model import Shift


def shift_from_record(record: Mapping[str, Any]) -> Shift:
    start_time = str(record.get("startTime", ""))
    end_time = str(record.get("endTime", ""))
    # reject malformed clock strings up front
    parse_time_to_minutes(start_time)
    parse_time_to_minutes(end_time)

    try:
        applicable_to = ApplicableTo(str(record.get("applicableTo") or ApplicableTo.BOTH.value).lower())
    except ValueError:
        raise ValidationError(f"applicableTo không hợp lệ: {record.get('applicableTo')!r}")

    return Shift(
        shift_id=record_id(record),
        name=str(record.get("name", "")),
        start_time=start_time,
        end_time=end_time,
        duration=as_decimal(record.get("duration"), "duration"),
        applicable_to=applicable_to,
        is_active=bool(record.get("isActive", True)),
    )
