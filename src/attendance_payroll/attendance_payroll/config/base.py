import os


def payroll_policy_from_env() -> dict:
    """Payroll rule overrides from the environment; unset keys keep the library defaults."""
    keys = (
        "LUNCH_BREAK_MINUTES",
        "STANDARD_WORKING_MINUTES",
        "OT_RULE",
        "OT_ELIGIBILITY_MINUTES",
        "OT_NOISE_FILTER_MINUTES",
        "OT_MULTIPLIER",
        "HOURS_PER_DAY",
        "FREE_PERMISSION_HOURS",
        "ESA_PF_RATE",
        "ALLOWANCE_TREATMENT",
        "OT_FALLBACK",
        "HOLIDAY_SCOPE_BY_EMPLOYEE_TYPE",
    )
    return {k: os.environ[k] for k in keys if os.environ.get(k)}
