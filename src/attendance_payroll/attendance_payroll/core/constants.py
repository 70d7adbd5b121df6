"""Constants and defaults for the payroll rules.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MINUTES_PER_DAY = 24 * 60

LUNCH_BREAK_MINUTES = 45
STANDARD_WORKING_MINUTES = 8 * 60
OT_ELIGIBILITY_MINUTES = 510
OT_NOISE_FILTER_MINUTES = 20

OT_MULTIPLIER = Decimal("1.5")
HOURS_PER_DAY = 8
FREE_PERMISSION_HOURS = Decimal("2")
ESA_PF_RATE = Decimal("0.12")

FOOD_ALLOWANCE_AMOUNT = Decimal("30")

CURRENCY_QUANTUM = Decimal("0.01")
