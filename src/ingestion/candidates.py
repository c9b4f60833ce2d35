"""
Candidate queries against the Campaign Finance API.

Each query builds a path under "{cycle}/...", hands it to the transport
client, and normalizes every item in the returned "results" list.

Usage:
    api = CandidatesAPI()
    api.find("H0NY01023", cycle=2026)
    api.leaders(LeaderCategory.END_CASH)
    api.state("NY", "house", 7)
"""
import logging
from typing import Any, Callable, Optional, Union

from src.config.constants import CURRENT_CYCLE
from src.ingestion.client import CampaignFinanceClient
from src.models.candidate import Candidate, LeaderCategory
from src.normalization.candidates import (
    candidate_from_api,
    candidate_from_search_result,
)
from src.normalization.fields import normalize_chamber, normalize_state

logger = logging.getLogger(__name__)


class CandidatesAPI:
    """
    Candidate lookups, leaderboards, search and seat listings.

    Lookups, leaderboards and new-candidate listings return full records;
    search and seat queries return the reduced search-form records.
    """

    def __init__(self, client: Optional[CampaignFinanceClient] = None):
        self.client = client or CampaignFinanceClient()

    def _results(self, path: str, params: Optional[dict] = None) -> list[dict]:
        """Raw "results" items for a path; missing or null counts as empty."""
        reply = self.client.invoke(path, params or {})
        results = reply.get("results") or []
        logger.info(f"{path}: {len(results)} results")
        return results

    def _fetch(
        self,
        path: str,
        params: Optional[dict] = None,
        builder: Callable[[dict], Candidate] = candidate_from_api,
    ) -> list[Candidate]:
        return [builder(item) for item in self._results(path, params)]

    def find(self, fec_id: str, cycle: int = CURRENT_CYCLE) -> Optional[Candidate]:
        """
        Get a single candidate by FEC candidate ID within a cycle.

        Args:
            fec_id: FEC candidate ID (e.g., "H0NY01023")
            cycle: Election cycle year (default: current)

        Returns:
            Candidate, or None if the API has no record
        """
        # Only the first item is normalized
        results = self._results(f"{cycle}/candidates/{fec_id}")
        return candidate_from_api(results[0]) if results else None

    def leaders(
        self,
        category: Union[LeaderCategory, str],
        cycle: int = CURRENT_CYCLE,
    ) -> list[Candidate]:
        """
        Get the leading candidates for a financial category within a cycle.

        Args:
            category: LeaderCategory or its string value (e.g., "end_cash")
            cycle: Election cycle year (default: current)

        Returns:
            Ranked list of full candidate records
        """
        try:
            category = LeaderCategory(category)
        except ValueError:
            logger.warning(f"Unknown leader category '{category}', passing through")
        else:
            category = category.value

        return self._fetch(f"{cycle}/candidates/leaders/{category}", {})

    def search(
        self,
        name: str,
        cycle: int = CURRENT_CYCLE,
        offset: Optional[int] = None,
    ) -> list[Candidate]:
        """
        Search candidates by name within a cycle.

        Args:
            name: Free-text name query
            cycle: Election cycle year (default: current)
            offset: Result offset for pagination

        Returns:
            List of search-form candidate records
        """
        return self._fetch(
            f"{cycle}/candidates/search",
            {"query": name, "offset": offset},
            builder=candidate_from_search_result,
        )

    def new_candidates(
        self,
        cycle: int = CURRENT_CYCLE,
        offset: Optional[int] = None,
    ) -> list[Candidate]:
        """Get the most recently registered candidates within a cycle."""
        return self._fetch(f"{cycle}/candidates/new", {"offset": offset})

    def state(
        self,
        state: str,
        chamber: Optional[str] = None,
        district: Optional[Any] = None,
        cycle: int = CURRENT_CYCLE,
        offset: Optional[int] = None,
    ) -> list[Candidate]:
        """
        Get candidates for a state's seats within a cycle.

        The path narrows as optional arguments are supplied:
        "{cycle}/seats/NY", then "/house", then "/7". The district is
        ignored unless a chamber is given.

        Args:
            state: State code or name (e.g., "NY", "New York")
            chamber: "house" or "senate"
            district: House district number
            cycle: Election cycle year (default: current)
            offset: Result offset for pagination

        Returns:
            List of search-form candidate records
        """
        path = f"{cycle}/seats/{normalize_state(state) or state}"
        if chamber:
            path += f"/{normalize_chamber(chamber) or chamber}"
            if district is not None:
                path += f"/{district}"

        return self._fetch(path, {"offset": offset}, builder=candidate_from_search_result)

    state_chamber = state


# Convenience function
def get_candidates_api() -> CandidatesAPI:
    """Get a CandidatesAPI instance using the configured client."""
    return CandidatesAPI()
