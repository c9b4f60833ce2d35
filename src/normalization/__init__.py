"""Normalization module - API items to Candidate records."""

from src.normalization.candidates import (
    candidate_from_api,
    candidate_from_search_result,
)
from src.normalization.fields import (
    normalize_chamber,
    normalize_state,
    parse_amount,
    parse_committee,
    parse_district,
    parse_office,
    parse_state,
)

__all__ = [
    "candidate_from_api",
    "candidate_from_search_result",
    "normalize_chamber",
    "normalize_state",
    "parse_amount",
    "parse_committee",
    "parse_district",
    "parse_office",
    "parse_state",
]
