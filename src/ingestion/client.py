"""
Campaign Finance API client.

Handles authenticated requests to the ProPublica Campaign Finance API.
API Docs: https://projects.propublica.org/api-docs/campaign-finance/

Errors are not caught here: HTTP status errors, network failures and
malformed JSON all propagate to the caller.
"""
import logging
from typing import Any, Optional

import httpx

from src.config import settings

logger = logging.getLogger(__name__)


class CampaignFinanceClient:
    """
    Client for the Campaign Finance API.

    Usage:
        client = CampaignFinanceClient()
        reply = client.invoke("2026/candidates/H0NY01023")
        reply["results"]
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key or settings.PROPUBLICA_API_KEY
        if not self.api_key:
            raise ValueError("PROPUBLICA_API_KEY not found in settings")
        self.base_url = (base_url or settings.CAMPAIGN_FINANCE_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self._client = client  # Injected clients are reused and never closed

    def invoke(self, path: str, params: Optional[dict] = None) -> dict[str, Any]:
        """
        Make a GET request to the Campaign Finance API.

        Args:
            path: Path relative to the base URL, without extension
                (e.g., "2026/candidates/search")
            params: Query parameters; None values are dropped

        Returns:
            Parsed JSON envelope (contains a "results" list)
        """
        url = f"{self.base_url}/{path.strip('/')}.json"
        request_params = {k: v for k, v in (params or {}).items() if v is not None}
        headers = {"X-API-Key": self.api_key}

        logger.info(f"GET {url} params={request_params}")

        if self._client is not None:
            response = self._client.get(url, params=request_params, headers=headers)
            response.raise_for_status()
            return response.json()

        with httpx.Client(timeout=self.timeout) as client:
            response = client.get(url, params=request_params, headers=headers)
            response.raise_for_status()
            return response.json()
