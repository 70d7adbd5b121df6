from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OvertimeDecision:
    eligible: bool
    ot_minutes: int = 0


class OvertimeRule(ABC):
    """Strategy Pattern: decide OT from working minutes (after lunch)."""

    @abstractmethod
    def decide(self, working_minutes: int) -> OvertimeDecision:
        raise NotImplementedError
