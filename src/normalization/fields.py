"""
Field Coercion Helpers

Small, total functions that turn loosely-typed API values into the fields of
a Candidate. None of these raise: missing or malformed input resolves to
None, 0 or 0.0 depending on the field.

Usage:
    from src.normalization.fields import parse_office, parse_district

    parse_office("H0NY01023")              # Office.HOUSE
    parse_district("/seats/NY/house/07.json")  # 7
"""
from collections.abc import Mapping
from typing import Any, Optional
import logging
import math
import re

from pydantic import ValidationError

from src.config.constants import US_STATES
from src.models.candidate import CommitteeRef, Office

logger = logging.getLogger(__name__)

# Leading integer of a filename stem ("07abc" -> 7)
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _last_segment(uri: str) -> str:
    """Last '/'-delimited segment of a URI or path, ignoring trailing slashes."""
    return uri.rstrip("/").split("/")[-1]


# ============================================================================
# Response Field Parsing
# ============================================================================

def parse_state(raw: Optional[str]) -> Optional[str]:
    """
    Extract a two-letter state code from a state URI.

    Args:
        raw: State URI or path (e.g., "/states/NY.json")

    Returns:
        First two characters of the last path segment, or None

    Examples:
        >>> parse_state("http://x/y/NY")
        "NY"
        >>> parse_state("/states/CA.json")
        "CA"
        >>> parse_state(None)
        None
    """
    if raw is None:
        return None
    return _last_segment(str(raw))[:2] or None


def parse_office(fec_id: Optional[str]) -> Optional[Office]:
    """
    Derive the office sought from the first letter of an FEC candidate ID.

    Only the first character is inspected, and the match is case-sensitive.
    Anything that is not 'H' or 'S' (including an empty string) is treated
    as a presidential candidate.

    Args:
        fec_id: FEC candidate ID (e.g., "H0NY01023")

    Returns:
        Office.HOUSE, Office.SENATE, Office.PRESIDENT, or None if no ID
    """
    if fec_id is None:
        return None

    prefix = str(fec_id)[:1]
    if prefix == "H":
        return Office.HOUSE
    elif prefix == "S":
        return Office.SENATE
    return Office.PRESIDENT


def parse_district(uri: Any) -> int:
    """
    Extract a district number from a district URI.

    The number is the leading integer of the filename before the first '.', so
    "/seats/NY/house/07.json" is district 7. Unparsable and non-positive
    values both come back as 0 (at-large or unknown).

    Args:
        uri: District URI, or an int already parsed by the API

    Returns:
        District number >= 0
    """
    if uri is None or uri == "":
        return 0

    if isinstance(uri, int) and not isinstance(uri, bool):
        return uri if uri > 0 else 0

    stem = _last_segment(str(uri)).split(".")[0]
    match = _LEADING_INT.match(stem)
    if match is None:
        logger.debug(f"Unparsable district '{uri}', using 0")
        return 0

    district = int(match.group())
    return district if district > 0 else 0


def parse_committee(raw: Any) -> Optional[str]:
    """
    Extract the principal campaign committee ID.

    The committee arrives either as a nested mapping with an "id" field, or
    as a committee URI whose filename is the ID ("/committees/C00123.json").

    Args:
        raw: Committee mapping or URI

    Returns:
        Committee ID or None if the structure doesn't match
    """
    if isinstance(raw, str):
        return _last_segment(raw).split(".")[0] or None

    if isinstance(raw, Mapping):
        try:
            return CommitteeRef.model_validate(dict(raw)).id
        except ValidationError:
            logger.debug(f"Unrecognized committee structure: {raw!r}")
            return None

    return None


def parse_amount(raw: Any) -> float:
    """
    Coerce a monetary total to float.

    Args:
        raw: Amount as returned by the API (usually a string like "1234.50")

    Returns:
        Float amount, 0.0 when missing or non-numeric
    """
    if raw is None or raw == "":
        return 0.0

    try:
        amount = float(raw)
    except (ValueError, TypeError):
        logger.debug(f"Non-numeric amount '{raw}', using 0.0")
        return 0.0

    if not math.isfinite(amount):
        logger.debug(f"Non-finite amount '{raw}', using 0.0")
        return 0.0
    return amount


# ============================================================================
# Query Parameter Normalization
# ============================================================================

STATE_NAME_TO_CODE = {
    "Alabama": "AL", "Alaska": "AK", "Arizona": "AZ", "Arkansas": "AR",
    "California": "CA", "Colorado": "CO", "Connecticut": "CT", "Delaware": "DE",
    "Florida": "FL", "Georgia": "GA", "Hawaii": "HI", "Idaho": "ID",
    "Illinois": "IL", "Indiana": "IN", "Iowa": "IA", "Kansas": "KS",
    "Kentucky": "KY", "Louisiana": "LA", "Maine": "ME", "Maryland": "MD",
    "Massachusetts": "MA", "Michigan": "MI", "Minnesota": "MN", "Mississippi": "MS",
    "Missouri": "MO", "Montana": "MT", "Nebraska": "NE", "Nevada": "NV",
    "New Hampshire": "NH", "New Jersey": "NJ", "New Mexico": "NM", "New York": "NY",
    "North Carolina": "NC", "North Dakota": "ND", "Ohio": "OH", "Oklahoma": "OK",
    "Oregon": "OR", "Pennsylvania": "PA", "Rhode Island": "RI", "South Carolina": "SC",
    "South Dakota": "SD", "Tennessee": "TN", "Texas": "TX", "Utah": "UT",
    "Vermont": "VT", "Virginia": "VA", "Washington": "WA", "West Virginia": "WV",
    "Wisconsin": "WI", "Wyoming": "WY",
    "District of Columbia": "DC", "Puerto Rico": "PR"
}


def normalize_state(state: Optional[str]) -> Optional[str]:
    """
    Normalize a state query parameter to its 2-letter code.

    Args:
        state: State name or code (e.g., "Utah", "UT", "ut")

    Returns:
        2-letter uppercase state code (e.g., "UT") or None if invalid

    Examples:
        >>> normalize_state("Utah")
        "UT"
        >>> normalize_state("ut")
        "UT"
        >>> normalize_state("Atlantis")
        None
    """
    if not state:
        return None

    state_clean = state.strip()

    # Already a 2-letter code?
    if len(state_clean) == 2:
        code = state_clean.upper()
        return code if code in US_STATES else None

    # Case-insensitive name match
    for full_name, code in STATE_NAME_TO_CODE.items():
        if full_name.lower() == state_clean.lower():
            return code

    return None


CHAMBER_MAPPINGS = {
    "senate": "senate",
    "house": "house",
    "house of representatives": "house",
}


def normalize_chamber(chamber: Optional[str]) -> Optional[str]:
    """
    Normalize a chamber query parameter to lowercase standard format.

    Examples:
        >>> normalize_chamber("Senate")
        "senate"
        >>> normalize_chamber("House of Representatives")
        "house"
    """
    if not chamber:
        return None
    return CHAMBER_MAPPINGS.get(chamber.strip().lower())
