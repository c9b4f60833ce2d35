"""
Candidate data models.

A candidate is a person seeking a particular office within a particular
two-year election cycle. Each candidate is assigned a unique FEC ID within
a cycle.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Office(str, Enum):
    """Federal office sought, derived from the first letter of the FEC ID."""
    HOUSE = "house"
    SENATE = "senate"
    PRESIDENT = "president"


class LeaderCategory(str, Enum):
    """Financial metrics the API can rank candidates by."""
    INDIVIDUAL_TOTAL = "individual_total"
    CONTRIBUTION_TOTAL = "contribution_total"
    CANDIDATE_LOAN = "candidate_loan"
    RECEIPTS_TOTAL = "receipts_total"
    REFUND_TOTAL = "refund_total"
    PAC_TOTAL = "pac_total"
    DISBURSEMENTS_TOTAL = "disbursements_total"
    END_CASH = "end_cash"
    DEBTS_OWED = "debts_owed"

    @property
    def description(self) -> str:
        """Human-readable label for the leaderboard."""
        return _LEADER_DESCRIPTIONS[self]


_LEADER_DESCRIPTIONS = {
    LeaderCategory.INDIVIDUAL_TOTAL: "Contributions from individuals",
    LeaderCategory.CONTRIBUTION_TOTAL: "Total contributions",
    LeaderCategory.CANDIDATE_LOAN: "Loans from candidate",
    LeaderCategory.RECEIPTS_TOTAL: "Total receipts",
    LeaderCategory.REFUND_TOTAL: "Total refunds",
    LeaderCategory.PAC_TOTAL: "Contributions from PACs",
    LeaderCategory.DISBURSEMENTS_TOTAL: "Total disbursements",
    LeaderCategory.END_CASH: "Cash on hand",
    LeaderCategory.DEBTS_OWED: "Debts owed by",
}


class CommitteeRef(BaseModel):
    """The nested committee structure attached to candidate items."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Optional[str] = None


class Candidate(BaseModel):
    """
    A candidate record normalized from either API response shape.

    Full-form items (lookups, leaderboards, new candidates) populate every
    field. Search-form items (search, state seats) only populate identity
    fields; the financial totals stay None rather than 0.0.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "DOE, JANE",
                "id": "S4CA00123",
                "state": "CA",
                "office": "senate",
                "district": 0,
                "party": "REP",
                "committee_id": "C00512345",
            }
        }
    )

    # Identity
    name: Optional[str] = None
    id: str = Field(..., min_length=1, description="FEC candidate ID (e.g., H0NY01023)")
    state: Optional[str] = Field(None, description="Two-letter state code")
    office: Optional[Office] = None
    district: int = Field(0, ge=0, description="House district (0 = at-large or unknown)")
    party: Optional[str] = None

    # Links
    fec_uri: Optional[str] = None
    relative_uri: Optional[str] = None
    committee_id: Optional[str] = Field(None, description="Principal campaign committee FEC ID")

    # Mailing address
    mailing_city: Optional[str] = None
    mailing_address: Optional[str] = None
    mailing_state: Optional[str] = None
    mailing_zip: Optional[str] = None

    # Financial totals (full form only)
    total_receipts: Optional[float] = None
    total_contributions: Optional[float] = None
    total_from_individuals: Optional[float] = None
    total_from_pacs: Optional[float] = None
    candidate_loans: Optional[float] = None
    total_disbursements: Optional[float] = None
    total_refunds: Optional[float] = None
    debts_owed: Optional[float] = None
    begin_cash: Optional[float] = None
    end_cash: Optional[float] = None

    # Filing status
    status: Optional[str] = None
    date_coverage_from: Optional[str] = None
    date_coverage_to: Optional[str] = None

    def __str__(self) -> str:
        """Human-readable representation."""
        label = self.name or self.id
        affiliation = "-".join(part for part in (self.party, self.state) if part)
        affiliation_str = f" ({affiliation})" if affiliation else ""
        office_str = f" {self.office.value}" if self.office else ""
        district_str = f" (District {self.district})" if self.district else ""
        return f"{label}{affiliation_str}{office_str}{district_str}"
