from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Allowance


class AllowanceRepository(Protocol):
    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[Allowance]:
        raise NotImplementedError
