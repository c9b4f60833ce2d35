"""
Candidate Normalization

Builds Candidate records from the two item shapes the campaign finance API
returns:

- Full form: a flat candidate record with mailing address and financial
  totals. Returned by candidate lookups, leaderboards and new-candidate
  listings.
- Search form: identity nested under "candidate", plus "district" and
  "committee" at the top level. Returned by name search and state/seat
  queries. No financial totals.

Both builders are pure: no I/O, and the same item always produces an equal
record.
"""
from collections.abc import Mapping
from typing import Any, Dict

from src.models.candidate import Candidate
from src.normalization.fields import (
    parse_amount,
    parse_committee,
    parse_district,
    parse_office,
    parse_state,
)

# Financial totals copied from full-form items and coerced to float
FINANCIAL_FIELDS = (
    "total_receipts",
    "total_contributions",
    "total_from_individuals",
    "total_from_pacs",
    "candidate_loans",
    "total_disbursements",
    "total_refunds",
    "debts_owed",
    "begin_cash",
    "end_cash",
)

# String fields copied as-is from full-form items
PASSTHROUGH_FIELDS = (
    "name",
    "party",
    "fec_uri",
    "relative_uri",
    "mailing_city",
    "mailing_address",
    "mailing_state",
    "mailing_zip",
    "status",
    "date_coverage_from",
    "date_coverage_to",
)


def candidate_from_api(raw: Mapping[str, Any]) -> Candidate:
    """
    Build a Candidate from a full-form API item.

    Args:
        raw: One item from a candidate, leaders or new-candidates response

    Returns:
        Candidate with every field populated; missing totals become 0.0

    Example:
        >>> candidate = candidate_from_api({
        ...     "id": "H0NY01023",
        ...     "state": "/states/NY.json",
        ...     "total_receipts": "1234.5",
        ... })
        >>> candidate.office
        Office.HOUSE
        >>> candidate.total_receipts
        1234.5
    """
    fields: Dict[str, Any] = {key: raw.get(key) for key in PASSTHROUGH_FIELDS}
    fields.update({key: parse_amount(raw.get(key)) for key in FINANCIAL_FIELDS})

    return Candidate(
        id=raw.get("id"),
        state=parse_state(raw.get("state")),
        office=parse_office(raw.get("id")),
        district=parse_district(raw.get("district")),
        committee_id=parse_committee(raw.get("committee")),
        **fields,
    )


def candidate_from_search_result(raw: Mapping[str, Any]) -> Candidate:
    """
    Build a Candidate from a search-form API item.

    The state comes from characters 2-3 of the FEC ID ("S4CA00123" -> "CA")
    rather than from a state URI, since search items don't carry one.

    Args:
        raw: One item from a search or seats response

    Returns:
        Candidate with identity fields only; financial totals stay None
    """
    nested = raw.get("candidate")
    if not isinstance(nested, Mapping):
        nested = {}

    fec_id = nested.get("id")

    return Candidate(
        name=nested.get("name"),
        id=fec_id,
        state=(fec_id[2:4] or None) if fec_id else None,
        office=parse_office(fec_id),
        district=parse_district(raw.get("district")),
        party=nested.get("party"),
        committee_id=parse_committee(raw.get("committee")),
    )
