"""
Application-wide constants.

API endpoints, state codes, and election cycle numbers live here.
"""
from datetime import datetime

# API Base URLs
CAMPAIGN_FINANCE_BASE_URL = "https://api.propublica.org/campaign-finance/v1"

# US State and Territory Codes
US_STATES = [
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    # Territories with delegates
    "AS",  # American Samoa
    "DC",  # District of Columbia
    "GU",  # Guam
    "MP",  # Northern Mariana Islands
    "PR",  # Puerto Rico
    "VI",  # Virgin Islands
]

# Election cycles - calculated dynamically
# A cycle is named for the even year that closes it (2025 and 2026 -> 2026)
def _calculate_current_cycle() -> int:
    """Calculate the current two-year election cycle from today's date."""
    current_year = datetime.now().year
    return current_year + (current_year % 2)

CURRENT_CYCLE = _calculate_current_cycle()  # Auto-calculates (2026 in 2025)
