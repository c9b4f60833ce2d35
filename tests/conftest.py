# tests/conftest.py
import pytest


def make_full_item(**overrides: object) -> dict:
    """Full-form item as returned by candidate, leaders and new-candidates endpoints."""
    defaults = {
        "id": "H0NY01023",
        "name": "DOE, JOHN",
        "party": "DEM",
        "state": "/states/NY.json",
        "district": "/seats/NY/house/01.json",
        "fec_uri": "https://www.fec.gov/data/candidate/H0NY01023/",
        "relative_uri": "/candidates/H0NY01023.json",
        "committee": {"id": "C00512345", "name": "DOE FOR CONGRESS"},
        "mailing_city": "BROOKLYN",
        "mailing_address": "1 MAIN ST",
        "mailing_state": "NY",
        "mailing_zip": "11201",
        "status": "C",
        "total_receipts": "1234.5",
        "total_contributions": "1000.0",
        "total_from_individuals": "900.0",
        "total_from_pacs": "100.0",
        "candidate_loans": "0.0",
        "total_disbursements": "500.25",
        "total_refunds": "10.0",
        "debts_owed": "0",
        "begin_cash": "0",
        "end_cash": "734.25",
        "date_coverage_from": "2025-01-01",
        "date_coverage_to": "2025-06-30",
    }
    defaults.update(overrides)
    return defaults


def make_search_item(**overrides: object) -> dict:
    """Search-form item as returned by search and seats endpoints."""
    defaults = {
        "candidate": {"id": "S4CA00123", "name": "Jane Doe", "party": "REP"},
        "district": "path/3.xml",
        "committee": {"id": "C00654321"},
    }
    defaults.update(overrides)
    return defaults


class FakeClient:
    """Transport stand-in that records calls and returns a canned envelope."""

    def __init__(self, results=None, envelope=None):
        self.envelope = envelope if envelope is not None else {"results": results or []}
        self.calls = []

    def invoke(self, path, params=None):
        self.calls.append((path, params))
        return self.envelope


@pytest.fixture
def full_item():
    return make_full_item()


@pytest.fixture
def search_item():
    return make_search_item()
