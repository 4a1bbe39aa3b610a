"""Tests for GoogleSearchProvider."""

from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from ai_search_bot.data import SearchHit, SearchResponse
from ai_search_bot.errors import ProviderError
from ai_search_bot.search.google import GOOGLE_SEARCH_URL, GoogleSearchProvider


@pytest.fixture
def mock_response_data() -> dict[str, Any]:
    """Sample Custom Search JSON API response."""
    return {
        "kind": "customsearch#search",
        "searchInformation": {
            "searchTime": 0.31,
            "formattedSearchTime": "0.31",
            "totalResults": "12300",
            "formattedTotalResults": "12,300",
        },
        "items": [
            {
                "title": "Token bucket rate limiter",
                "link": "https://github.com/acme/limiter",
                "snippet": "A token bucket implementation.",
                "displayLink": "github.com",
                "formattedUrl": "https://github.com/acme/limiter",
            },
            {
                "title": "Leaky bucket",
                "link": "https://github.com/acme/leaky",
                "snippet": "Leaky bucket algorithm.",
                "displayLink": "github.com",
            },
        ],
    }


@pytest.fixture
def provider() -> GoogleSearchProvider:
    return GoogleSearchProvider(api_key="test-key", engine_id="test-cx")


def _mock_get(
    monkeypatch: pytest.MonkeyPatch,
    data: dict[str, Any],
    status_code: int = 200,
) -> dict[str, Any]:
    captured: dict[str, Any] = {}
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.is_success = 200 <= status_code < 300
    mock_response.json.return_value = data

    async def mock_get(self: httpx.AsyncClient, url: str, **kwargs: Any) -> MagicMock:
        captured["url"] = url
        captured.update(kwargs)
        return mock_response

    monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)
    return captured


def test_init_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOOGLE_SEARCH_API_KEY", raising=False)
    with pytest.raises(ValueError, match="API key required"):
        GoogleSearchProvider(engine_id="cx")


def test_init_requires_engine_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOOGLE_SEARCH_ENGINE_ID", raising=False)
    with pytest.raises(ValueError, match="engine ID required"):
        GoogleSearchProvider(api_key="key")


def test_init_uses_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_SEARCH_API_KEY", "env-key")
    monkeypatch.setenv("GOOGLE_SEARCH_ENGINE_ID", "env-cx")
    provider = GoogleSearchProvider()
    assert provider._api_key == "env-key"
    assert provider._engine_id == "env-cx"


async def test_search_returns_hits(
    provider: GoogleSearchProvider,
    mock_response_data: dict[str, Any],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _mock_get(monkeypatch, mock_response_data)

    response = await provider.search("rate limiter")

    assert isinstance(response, SearchResponse)
    assert len(response.hits) == 2
    assert response.hits[0] == SearchHit(
        title="Token bucket rate limiter",
        url="https://github.com/acme/limiter",
        snippet="A token bucket implementation.",
        display_source="github.com",
    )
    assert response.metadata.total_results_label == "12300"
    assert response.metadata.elapsed_seconds == pytest.approx(0.31)


async def test_search_passes_query_unchanged(
    provider: GoogleSearchProvider,
    mock_response_data: dict[str, Any],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured = _mock_get(monkeypatch, mock_response_data)
    query = 'site:github.com "rate limiter" filetype:pdf'

    await provider.search(query)

    assert captured["url"] == GOOGLE_SEARCH_URL
    assert captured["params"] == {"key": "test-key", "cx": "test-cx", "q": query, "num": 10}


async def test_search_without_items_returns_no_hits(
    provider: GoogleSearchProvider, monkeypatch: pytest.MonkeyPatch
) -> None:
    _mock_get(monkeypatch, {"searchInformation": {"totalResults": "0", "searchTime": 0.1}})
    response = await provider.search("nothing")
    assert response.hits == ()
    assert response.metadata.total_results_label == "0"


async def test_search_error_status_raises(
    provider: GoogleSearchProvider, monkeypatch: pytest.MonkeyPatch
) -> None:
    _mock_get(monkeypatch, {"error": {"code": 403}}, status_code=403)
    with pytest.raises(ProviderError, match="403") as exc_info:
        await provider.search("query")
    assert exc_info.value.status_code == 403


async def test_search_malformed_response_raises(
    provider: GoogleSearchProvider, monkeypatch: pytest.MonkeyPatch
) -> None:
    _mock_get(monkeypatch, {"items": []})
    with pytest.raises(ProviderError, match="searchInformation"):
        await provider.search("query")


def test_num_results_clamped() -> None:
    provider = GoogleSearchProvider(api_key="k", engine_id="cx", num_results=50)
    assert provider._num_results == 10
