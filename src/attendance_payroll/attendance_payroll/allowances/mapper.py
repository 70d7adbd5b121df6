from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import as_date
from ..common.records import as_decimal, record_id
from ..core.constants import FOOD_ALLOWANCE_AMOUNT
from ..core.enums import AllowanceType
from ..core.exceptions import ValidationError
from .model import Allowance


def allowance_from_record(record: Mapping[str, Any]) -> Allowance:
    try:
        allowance_type = AllowanceType(str(record.get("type", "")).lower())
    except ValueError:
        raise ValidationError(f"Loại phụ cấp không hợp lệ: {record.get('type')!r}")

    if allowance_type == AllowanceType.FOOD:
        amount = FOOD_ALLOWANCE_AMOUNT
    else:
        amount = as_decimal(record.get("amount"), "amount")

    return Allowance(
        allowance_id=record_id(record),
        employee_id=str(record.get("employeeId", "")),
        work_date=as_date(record["date"]),
        allowance_type=allowance_type,
        amount=amount,
    )
