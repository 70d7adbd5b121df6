from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.constants import FOOD_ALLOWANCE_AMOUNT
from ..core.enums import AllowanceType


@dataclass(frozen=True)
class Allowance:
    """Thực thể miền (domain): Phụ cấp (ăn trưa / tạm ứng)."""

    allowance_id: str
    employee_id: str
    work_date: date
    allowance_type: AllowanceType
    amount: Decimal


def new_food_allowance(*, allowance_id: str, employee_id: str, work_date: date) -> Allowance:
    """Food allowances always carry the fixed amount."""
    return Allowance(
        allowance_id=allowance_id,
        employee_id=employee_id,
        work_date=work_date,
        allowance_type=AllowanceType.FOOD,
        amount=FOOD_ALLOWANCE_AMOUNT,
    )
