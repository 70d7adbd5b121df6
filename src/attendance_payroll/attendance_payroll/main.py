from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv


from .config import get_settings_module
from .core.policy import PayrollPolicy

logger = logging.getLogger(__name__)


def load_policy() -> PayrollPolicy:
    """Read `.env`, pick the settings module from APP_ENV and build the payroll policy."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    policy = PayrollPolicy.from_settings(getattr(settings, "PAYROLL_POLICY", {}))

    if getattr(settings, "DEBUG", False):
        logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "DEBUG"))

    logger.debug("settings=%s policy=%s", settings_module, policy)
    return policy
