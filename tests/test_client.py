"""CampaignFinanceClient tests."""

import httpx
import pytest

from src.ingestion.client import CampaignFinanceClient


def _make_client(handler) -> CampaignFinanceClient:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return CampaignFinanceClient(
        api_key="test-key",
        base_url="https://api.example.org/campaign-finance/v1/",
        client=http_client,
    )


class TestInvoke:

    def test_builds_url_and_headers(self) -> None:
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["key"] = request.headers.get("X-API-Key")
            return httpx.Response(200, json={"status": "OK", "results": []})

        reply = _make_client(handler).invoke("2026/candidates/H0NY01023")

        assert captured["url"] == "https://api.example.org/campaign-finance/v1/2026/candidates/H0NY01023.json"
        assert captured["key"] == "test-key"
        assert reply == {"status": "OK", "results": []}

    def test_none_params_not_sent(self) -> None:
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured.update(dict(request.url.params))
            return httpx.Response(200, json={"results": []})

        _make_client(handler).invoke("2026/candidates/search", {"query": "Doe", "offset": None})

        assert captured == {"query": "Doe"}

    def test_offset_sent(self) -> None:
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured.update(dict(request.url.params))
            return httpx.Response(200, json={"results": []})

        _make_client(handler).invoke("2026/candidates/new", {"offset": 20})

        assert captured == {"offset": "20"}

    def test_http_error_propagates(self) -> None:
        client = _make_client(lambda request: httpx.Response(500, json={"error": "boom"}))

        with pytest.raises(httpx.HTTPStatusError):
            client.invoke("2026/candidates/new")

    def test_network_error_propagates(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(httpx.ConnectError):
            _make_client(handler).invoke("2026/candidates/new")

    def test_malformed_json_propagates(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(ValueError):
            client.invoke("2026/candidates/new")


class TestConfiguration:

    def test_missing_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from src.config import settings

        monkeypatch.setattr(settings, "PROPUBLICA_API_KEY", None)

        with pytest.raises(ValueError):
            CampaignFinanceClient()

    def test_defaults_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from src.config import settings

        monkeypatch.setattr(settings, "PROPUBLICA_API_KEY", "from-env")
        monkeypatch.setattr(settings, "HTTP_TIMEOUT", 12.0)

        client = CampaignFinanceClient()

        assert client.api_key == "from-env"
        assert client.timeout == 12.0
        assert client.base_url == settings.CAMPAIGN_FINANCE_BASE_URL
