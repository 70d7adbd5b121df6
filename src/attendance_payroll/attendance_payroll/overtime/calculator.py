from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.time_utils import minutes_to_decimal_hours, minutes_to_hours_string, parse_time_to_minutes
from ..core.constants import MINUTES_PER_DAY
from ..core.policy import DEFAULT_POLICY, PayrollPolicy
from .factory import OvertimeRuleFactory
from .rules.base import OvertimeRule


@dataclass(frozen=True)
class DurationResult:
    """Elapsed, working and OT time for one shift, all from integer minutes."""

    total_minutes: int = 0
    working_minutes: int = 0
    ot_minutes: int = 0
    is_ot_eligible: bool = False

    @property
    def working_hours(self) -> float:
        return minutes_to_decimal_hours(self.working_minutes)

    @property
    def ot_hours(self) -> float:
        return minutes_to_decimal_hours(self.ot_minutes)

    @property
    def working_duration_text(self) -> str:
        return minutes_to_hours_string(self.working_minutes)

    @property
    def ot_duration_text(self) -> str:
        return minutes_to_hours_string(self.ot_minutes)


ZERO_DURATION = DurationResult()


class DurationCalculator:
    """Standard rule: (end - start) - lunch break, not below 0; OT decided by the rule."""

    def __init__(self, *, lunch_break_minutes: int, rule: OvertimeRule):
        self._lunch_break_minutes = int(lunch_break_minutes)
        self._rule = rule

    @classmethod
    def for_policy(cls, policy: PayrollPolicy) -> "DurationCalculator":
        return cls(
            lunch_break_minutes=policy.lunch_break_minutes,
            rule=OvertimeRuleFactory().for_policy(policy),
        )

    def calculate(self, start_time: Optional[str], end_time: Optional[str]) -> DurationResult:
        if not (start_time or "").strip() or not (end_time or "").strip():
            return ZERO_DURATION

        start = parse_time_to_minutes(start_time)
        end = parse_time_to_minutes(end_time)

        total = end - start
        if total < 0:
            # shift crosses midnight
            total += MINUTES_PER_DAY

        working = max(0, total - self._lunch_break_minutes)
        decision = self._rule.decide(working)
        return DurationResult(
            total_minutes=total,
            working_minutes=working,
            ot_minutes=decision.ot_minutes,
            is_ot_eligible=decision.eligible,
        )


_DEFAULT_CALCULATOR = DurationCalculator.for_policy(DEFAULT_POLICY)


def calculate_attendance_duration(
    start_time: Optional[str],
    end_time: Optional[str],
    *,
    policy: Optional[PayrollPolicy] = None,
) -> DurationResult:
    calculator = DurationCalculator.for_policy(policy) if policy else _DEFAULT_CALCULATOR
    return calculator.calculate(start_time, end_time)
