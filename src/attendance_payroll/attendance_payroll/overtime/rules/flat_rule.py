from __future__ import annotations

from ...core.constants import STANDARD_WORKING_MINUTES
from .base import OvertimeDecision, OvertimeRule


class FlatOvertimeRule(OvertimeRule):
    """Anything over the standard day is OT (no eligibility floor, no filter)."""

    def __init__(self, standard_minutes: int = STANDARD_WORKING_MINUTES):
        self.standard_minutes = int(standard_minutes)

    def decide(self, working_minutes: int) -> OvertimeDecision:
        ot = max(0, int(working_minutes) - self.standard_minutes)
        return OvertimeDecision(eligible=ot > 0, ot_minutes=ot)
