from src.attendance_payroll.attendance_payroll.core.enums import OvertimeRuleKind
from src.attendance_payroll.attendance_payroll.core.policy import PayrollPolicy
from src.attendance_payroll.attendance_payroll.overtime.factory import OvertimeRuleFactory
from src.attendance_payroll.attendance_payroll.overtime.rules.flat_rule import FlatOvertimeRule
from src.attendance_payroll.attendance_payroll.overtime.rules.threshold_rule import ThresholdOvertimeRule


def test_factory_defaults_to_threshold_rule():
    rule = OvertimeRuleFactory().for_policy(PayrollPolicy())

    assert isinstance(rule, ThresholdOvertimeRule)
    assert rule.standard_minutes == 480
    assert rule.eligibility_minutes == 510
    assert rule.noise_minutes == 20


def test_factory_builds_flat_rule():
    rule = OvertimeRuleFactory().for_policy(PayrollPolicy(ot_rule=OvertimeRuleKind.FLAT))

    assert isinstance(rule, FlatOvertimeRule)
    assert rule.decide(480).ot_minutes == 0
    assert rule.decide(481).ot_minutes == 1
