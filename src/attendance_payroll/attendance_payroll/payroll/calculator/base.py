from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...allowances.model import Allowance
from ...attendance.model import AttendanceRecord
from ...employees.model import Employee
from ...holidays.model import Holiday
from ..model import SalaryReport


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        employee: Employee,
        attendance: Iterable[AttendanceRecord],
        allowances: Iterable[Allowance],
        holidays: Iterable[Holiday],
        year: int,
        month: int,
    ) -> SalaryReport:
        raise NotImplementedError
