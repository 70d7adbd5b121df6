from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from . import constants
from .enums import AllowanceTreatment, OtFallback, OvertimeRuleKind
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class PayrollPolicy:
    """Every tunable payroll rule in one immutable value.

    Defaults reproduce the canonical rule set: 45 minute lunch, 8 h standard
    day, OT only from 8 h 30 m of work with a 20 minute noise filter, OT paid
    at 1.5x, 2 free permission hours for staff, 12% ESA/PF, allowances
    deducted from net pay, manual OT preferred per attendance record.
    """

    lunch_break_minutes: int = constants.LUNCH_BREAK_MINUTES
    standard_working_minutes: int = constants.STANDARD_WORKING_MINUTES
    ot_rule: OvertimeRuleKind = OvertimeRuleKind.THRESHOLD
    ot_eligibility_minutes: int = constants.OT_ELIGIBILITY_MINUTES
    ot_noise_filter_minutes: int = constants.OT_NOISE_FILTER_MINUTES
    ot_multiplier: Decimal = constants.OT_MULTIPLIER
    hours_per_day: int = constants.HOURS_PER_DAY
    free_permission_hours: Decimal = constants.FREE_PERMISSION_HOURS
    esa_pf_rate: Decimal = constants.ESA_PF_RATE
    allowance_treatment: AllowanceTreatment = AllowanceTreatment.DEDUCTION
    ot_fallback: OtFallback = OtFallback.PER_RECORD
    holiday_scope_by_employee_type: bool = False

    def __post_init__(self) -> None:
        if self.lunch_break_minutes < 0:
            raise ConfigurationError("lunch_break_minutes must not be negative")
        if self.standard_working_minutes <= 0:
            raise ConfigurationError("standard_working_minutes must be positive")
        if self.ot_eligibility_minutes < self.standard_working_minutes:
            raise ConfigurationError("ot_eligibility_minutes must be >= standard_working_minutes")
        if self.ot_noise_filter_minutes < 0:
            raise ConfigurationError("ot_noise_filter_minutes must not be negative")
        if self.hours_per_day <= 0:
            raise ConfigurationError("hours_per_day must be positive")
        if self.ot_multiplier < 0 or self.esa_pf_rate < 0 or self.free_permission_hours < 0:
            raise ConfigurationError("rates and allowances must not be negative")

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "PayrollPolicy":
        """Build a policy from a settings dict (see `attendance_payroll.config.*.PAYROLL_POLICY`).

        Keys are upper-case; missing keys keep the default.
        """

        default = cls()
        try:
            return cls(
                lunch_break_minutes=int(settings.get("LUNCH_BREAK_MINUTES", default.lunch_break_minutes)),
                standard_working_minutes=int(
                    settings.get("STANDARD_WORKING_MINUTES", default.standard_working_minutes)
                ),
                ot_rule=OvertimeRuleKind(str(settings.get("OT_RULE", default.ot_rule.value)).lower()),
                ot_eligibility_minutes=int(settings.get("OT_ELIGIBILITY_MINUTES", default.ot_eligibility_minutes)),
                ot_noise_filter_minutes=int(
                    settings.get("OT_NOISE_FILTER_MINUTES", default.ot_noise_filter_minutes)
                ),
                ot_multiplier=Decimal(str(settings.get("OT_MULTIPLIER", default.ot_multiplier))),
                hours_per_day=int(settings.get("HOURS_PER_DAY", default.hours_per_day)),
                free_permission_hours=Decimal(
                    str(settings.get("FREE_PERMISSION_HOURS", default.free_permission_hours))
                ),
                esa_pf_rate=Decimal(str(settings.get("ESA_PF_RATE", default.esa_pf_rate))),
                allowance_treatment=AllowanceTreatment(
                    str(settings.get("ALLOWANCE_TREATMENT", default.allowance_treatment.value)).lower()
                ),
                ot_fallback=OtFallback(str(settings.get("OT_FALLBACK", default.ot_fallback.value)).lower()),
                holiday_scope_by_employee_type=_as_bool(
                    settings.get("HOLIDAY_SCOPE_BY_EMPLOYEE_TYPE", default.holiday_scope_by_employee_type)
                ),
            )
        except (ValueError, InvalidOperation) as exc:
            raise ConfigurationError(f"Invalid payroll policy setting: {exc}") from exc


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


DEFAULT_POLICY = PayrollPolicy()
