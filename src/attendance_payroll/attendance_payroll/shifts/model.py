from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..core.enums import ApplicableTo


@dataclass(frozen=True)
class Shift:
    """Thực thể miền (domain): Ca làm việc (Shift).

    Chỉ là thông tin mô tả; OT luôn tính theo giờ vào/ra thực tế.
    """

    shift_id: str
    name: str
    start_time: str
    end_time: str
    duration: Decimal = Decimal("0")
    applicable_to: ApplicableTo = ApplicableTo.BOTH
    is_active: bool = True
