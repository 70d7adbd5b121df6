from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import OvertimeRuleKind
from ..core.exceptions import ConfigurationError
from ..core.policy import PayrollPolicy
from .rules.base import OvertimeRule
from .rules.flat_rule import FlatOvertimeRule
from .rules.threshold_rule import ThresholdOvertimeRule


@dataclass
class OvertimeRuleFactory:
    """Factory Pattern: choose the OT rule configured in the policy."""

    def for_policy(self, policy: PayrollPolicy) -> OvertimeRule:
        if policy.ot_rule == OvertimeRuleKind.FLAT:
            return FlatOvertimeRule(standard_minutes=policy.standard_working_minutes)
        if policy.ot_rule == OvertimeRuleKind.THRESHOLD:
            return ThresholdOvertimeRule(
                standard_minutes=policy.standard_working_minutes,
                eligibility_minutes=policy.ot_eligibility_minutes,
                noise_minutes=policy.ot_noise_filter_minutes,
            )
        raise ConfigurationError(f"Unknown OT rule: {policy.ot_rule!r}")
