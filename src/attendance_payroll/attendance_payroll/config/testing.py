# Fixed canonical rules: tests must not depend on the developer's .env
PAYROLL_POLICY = {
    "OT_RULE": "threshold",
    "OT_ELIGIBILITY_MINUTES": 510,
    "OT_NOISE_FILTER_MINUTES": 20,
    "ALLOWANCE_TREATMENT": "deduction",
    "OT_FALLBACK": "per_record",
}

DEBUG = False
TESTING = True
