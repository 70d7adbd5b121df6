from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError


def record_id(record: Mapping[str, Any]) -> str:
    return str(record.get("id") or "")


def as_decimal(value: Any, field_name: str) -> Decimal:
    """Absent / empty numeric fields default to 0."""
    if value is None or value == "":
        return Decimal("0")
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field_name} không phải số: {value!r}")
    if not result.is_finite():
        raise ValidationError(f"{field_name} không phải số: {value!r}")
    return result


def optional_text(value: Any) -> Optional[str]:
    text = str(value).strip() if value is not None else ""
    return text or None
