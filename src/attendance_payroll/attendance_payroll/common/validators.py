from __future__ import annotations

from ..core.exceptions import ValidationError


def require_month(month: int) -> int:
    """Zero-based month (0 = January)."""
    if not 0 <= int(month) <= 11:
        raise ValidationError(f"Tháng không hợp lệ (0-11): {month}")
    return int(month)
