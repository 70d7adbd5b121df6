from decimal import Decimal

import pytest

from src.attendance_payroll.attendance_payroll.common.time_utils import (
    decimal_hours_to_minutes,
    decimal_hours_to_time_string,
    minutes_to_decimal_hours,
    minutes_to_hours_string,
    parse_time_to_minutes,
    time_string_to_decimal_hours,
)
from src.attendance_payroll.attendance_payroll.core.exceptions import ValidationError


def test_parse_time_to_minutes():
    assert parse_time_to_minutes("08:30") == 510
    assert parse_time_to_minutes("00:00") == 0
    assert parse_time_to_minutes("23:59") == 23 * 60 + 59


@pytest.mark.parametrize("value", ["", None, "   "])
def test_parse_time_to_minutes_empty_is_zero(value):
    assert parse_time_to_minutes(value) == 0


@pytest.mark.parametrize("value", ["9am", "25:00", "12:60", "12", "12:30:15"])
def test_parse_time_to_minutes_rejects_malformed(value):
    with pytest.raises(ValidationError):
        parse_time_to_minutes(value)


def test_minutes_to_hours_string():
    assert minutes_to_hours_string(435) == "7h 15m"
    assert minutes_to_hours_string(0) == "0h 0m"
    assert minutes_to_hours_string(44) == "0h 44m"


def test_decimal_hours_round_to_whole_minutes():
    assert decimal_hours_to_minutes(1.25) == 75
    assert decimal_hours_to_minutes(Decimal("1.5")) == 90
    assert decimal_hours_to_minutes(0.3333) == 20
    assert minutes_to_decimal_hours(75) == 1.25
    assert decimal_hours_to_time_string(1.25) == "1h 15m"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1h 15m", Decimal("1.25")),
        ("2h", Decimal("2")),
        ("1:30", Decimal("1.5")),
        ("1.25", Decimal("1.25")),
        ("", Decimal("0")),
        (None, Decimal("0")),
        (3, Decimal("3")),
    ],
)
def test_time_string_to_decimal_hours(text, expected):
    assert time_string_to_decimal_hours(text) == expected


@pytest.mark.parametrize("text", ["abc", "1:xx", "nan"])
def test_time_string_to_decimal_hours_rejects_garbage(text):
    with pytest.raises(ValidationError):
        time_string_to_decimal_hours(text)
