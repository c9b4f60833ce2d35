"""Config module - settings and constants."""

from src.config.settings import settings
from src.config.constants import (
    CAMPAIGN_FINANCE_BASE_URL,
    CURRENT_CYCLE,
    US_STATES,
)

__all__ = [
    "settings",
    "CAMPAIGN_FINANCE_BASE_URL",
    "CURRENT_CYCLE",
    "US_STATES",
]
