from __future__ import annotations

from ...core.constants import OT_ELIGIBILITY_MINUTES, OT_NOISE_FILTER_MINUTES, STANDARD_WORKING_MINUTES
from .base import OvertimeDecision, OvertimeRule


class ThresholdOvertimeRule(OvertimeRule):
    """OT counts from the standard day, but only once the eligibility floor is reached.

    Raw OT of `noise_minutes` or less is dropped (late clock-outs by a few
    minutes do not earn OT).
    """

    def __init__(
        self,
        standard_minutes: int = STANDARD_WORKING_MINUTES,
        eligibility_minutes: int = OT_ELIGIBILITY_MINUTES,
        noise_minutes: int = OT_NOISE_FILTER_MINUTES,
    ):
        self.standard_minutes = int(standard_minutes)
        self.eligibility_minutes = int(eligibility_minutes)
        self.noise_minutes = int(noise_minutes)

    def decide(self, working_minutes: int) -> OvertimeDecision:
        working_minutes = int(working_minutes)
        if working_minutes < self.eligibility_minutes:
            return OvertimeDecision(eligible=False)

        ot = max(0, working_minutes - self.standard_minutes)
        if ot <= self.noise_minutes:
            return OvertimeDecision(eligible=False)
        return OvertimeDecision(eligible=True, ot_minutes=ot)
