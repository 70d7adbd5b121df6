from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import ApplicableTo, HolidayType


@dataclass(frozen=True)
class Holiday:
    """Thực thể miền (domain): Ngày lễ.

    Ngày lễ lặp lại (`is_recurring`) khớp cùng ngày/tháng ở mọi năm.
    """

    holiday_id: str
    name: str
    holiday_date: date
    is_recurring: bool = False
    holiday_type: HolidayType = HolidayType.OTHER
    applicable_to: ApplicableTo = ApplicableTo.BOTH
