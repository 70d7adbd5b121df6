"""Clock-string and duration arithmetic.

All durations are carried as integer minutes; decimal hours and "Xh Ym"
strings are derived from the minutes so both representations agree.
"""

from __future__ import annotations

import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from ..core.exceptions import ValidationError

Number = Union[int, float, Decimal]

_HOURS_MINUTES_TEXT = re.compile(r"^\s*(\d+)\s*h(?:\s*(\d+)\s*m)?\s*$", re.IGNORECASE)


def parse_time_to_minutes(value: Optional[str]) -> int:
    """Minutes since 00:00 for an "HH:MM" clock string.

    Empty input means "not recorded" and gives 0.
    """
    v = (value or "").strip()
    if not v:
        return 0
    try:
        t = datetime.strptime(v, "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Giờ không hợp lệ (HH:MM): {value!r}")
    return t.hour * 60 + t.minute


def minutes_to_hours_string(minutes: int) -> str:
    minutes = int(minutes)
    return f"{minutes // 60}h {minutes % 60}m"


def decimal_hours_to_minutes(hours: Number) -> int:
    """Round decimal hours to the nearest whole minute."""
    try:
        value = Decimal(str(hours)) * 60
    except InvalidOperation:
        raise ValidationError(f"Số giờ không hợp lệ: {hours!r}")
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def minutes_to_decimal_hours(minutes: int) -> float:
    return int(minutes) / 60


def time_string_to_decimal_hours(value) -> Decimal:
    """Read a manually entered hour amount.

    Accepts "1h 15m", "2h", "1:15", "1.25" or a plain number; empty input
    gives 0.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))

    v = str(value).strip()
    if not v:
        return Decimal("0")

    m = _HOURS_MINUTES_TEXT.match(v)
    if m:
        return Decimal(m.group(1)) + Decimal(m.group(2) or 0) / 60

    if ":" in v:
        parts = v.split(":")
        if len(parts) != 2 or not all(p.strip().isdigit() for p in parts):
            raise ValidationError(f"Số giờ không hợp lệ: {value!r}")
        return Decimal(parts[0]) + Decimal(parts[1]) / 60

    try:
        result = Decimal(v)
    except InvalidOperation:
        raise ValidationError(f"Số giờ không hợp lệ: {value!r}")
    if not result.is_finite():
        raise ValidationError(f"Số giờ không hợp lệ: {value!r}")
    return result


def decimal_hours_to_time_string(hours: Number) -> str:
    return minutes_to_hours_string(decimal_hours_to_minutes(hours))
