import os

from .base import payroll_policy_from_env

PAYROLL_POLICY = payroll_policy_from_env()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
