import pytest

from src.attendance_payroll.attendance_payroll.common.time_utils import minutes_to_hours_string
from src.attendance_payroll.attendance_payroll.core.enums import OvertimeRuleKind
from src.attendance_payroll.attendance_payroll.core.exceptions import ValidationError
from src.attendance_payroll.attendance_payroll.core.policy import PayrollPolicy
from src.attendance_payroll.attendance_payroll.overtime.calculator import (
    DurationCalculator,
    calculate_attendance_duration,
)
from src.attendance_payroll.attendance_payroll.overtime.rules.threshold_rule import ThresholdOvertimeRule


def _clock(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def test_lunch_break_is_deducted():
    d = calculate_attendance_duration("09:00", "17:00")

    assert d.total_minutes == 480
    assert d.working_minutes == 435
    assert d.working_duration_text == "7h 15m"
    assert d.working_hours == 7.25
    assert d.ot_minutes == 0
    assert d.is_ot_eligible is False


def test_full_day_with_overtime():
    d = calculate_attendance_duration("08:00", "18:00")

    assert d.total_minutes == 600
    assert d.working_minutes == 555
    assert d.working_duration_text == "9h 15m"
    assert d.ot_minutes == 75
    assert d.ot_hours == pytest.approx(1.25)
    assert d.ot_duration_text == "1h 15m"
    assert d.is_ot_eligible is True


def test_ot_counts_from_standard_day_once_eligible():
    d = calculate_attendance_duration("09:00", "18:29")

    assert d.working_minutes == 524
    assert d.is_ot_eligible is True
    assert d.ot_minutes == 44


@pytest.mark.parametrize(
    "end,working,eligible,ot",
    [
        ("18:14", 509, False, 0),
        ("18:15", 510, True, 30),
        ("18:16", 511, True, 31),
    ],
)
def test_eligibility_boundary(end, working, eligible, ot):
    d = calculate_attendance_duration("09:00", end)

    assert d.working_minutes == working
    assert d.is_ot_eligible is eligible
    assert d.ot_minutes == ot


def test_overnight_shift_wraps_midnight():
    d = calculate_attendance_duration("22:00", "06:00")

    assert d.total_minutes == 480
    assert d.working_minutes == 435


def test_equal_times_are_zero_not_a_full_day():
    d = calculate_attendance_duration("09:00", "09:00")

    assert d.total_minutes == 0
    assert d.working_minutes == 0
    assert d.is_ot_eligible is False


def test_short_shift_floors_at_zero():
    d = calculate_attendance_duration("09:00", "09:30")

    assert d.total_minutes == 30
    assert d.working_minutes == 0


@pytest.mark.parametrize(
    "start,end",
    [("", "17:00"), ("09:00", None), (None, None), ("09:00", "   "), ("  ", "17:00")],
)
def test_missing_time_gives_zero_result(start, end):
    d = calculate_attendance_duration(start, end)

    assert d.total_minutes == 0
    assert d.working_minutes == 0
    assert d.ot_minutes == 0
    assert d.is_ot_eligible is False
    assert d.working_duration_text == "0h 0m"
    assert d.ot_duration_text == "0h 0m"


def test_malformed_time_raises():
    with pytest.raises(ValidationError):
        calculate_attendance_duration("9am", "17:00")


def test_working_hours_monotonic_in_end_time():
    start = 9 * 60
    previous = -1
    for end in range(start, 24 * 60, 7):
        d = calculate_attendance_duration(_clock(start), _clock(end))
        assert d.working_minutes >= previous
        previous = d.working_minutes


def test_text_and_numbers_agree():
    for end in ("17:59", "18:44", "20:13", "23:30"):
        d = calculate_attendance_duration("08:00", end)
        assert d.working_duration_text == minutes_to_hours_string(round(d.working_hours * 60))
        assert d.ot_duration_text == minutes_to_hours_string(round(d.ot_hours * 60))


def test_noise_filter_drops_small_overtime():
    calc = DurationCalculator(
        lunch_break_minutes=45,
        rule=ThresholdOvertimeRule(standard_minutes=480, eligibility_minutes=480, noise_minutes=20),
    )

    at_filter = calc.calculate("09:00", "18:05")
    above_filter = calc.calculate("09:00", "18:06")

    assert at_filter.working_minutes == 500
    assert at_filter.ot_minutes == 0
    assert at_filter.is_ot_eligible is False
    assert above_filter.working_minutes == 501
    assert above_filter.ot_minutes == 21
    assert above_filter.is_ot_eligible is True


def test_flat_rule_from_policy():
    policy = PayrollPolicy(ot_rule=OvertimeRuleKind.FLAT)
    d = calculate_attendance_duration("09:00", "17:50", policy=policy)

    assert d.working_minutes == 485
    assert d.ot_minutes == 5
    assert d.is_ot_eligible is True


def test_late_eligibility_without_noise_filter():
    policy = PayrollPolicy(ot_eligibility_minutes=525, ot_noise_filter_minutes=0)

    below = calculate_attendance_duration("09:00", "18:29", policy=policy)
    at = calculate_attendance_duration("09:00", "18:30", policy=policy)

    assert below.working_minutes == 524
    assert below.ot_minutes == 0
    assert at.working_minutes == 525
    assert at.ot_minutes == 45
