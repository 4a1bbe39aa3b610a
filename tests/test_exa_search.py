"""Tests for ExaSearchProvider."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ai_search_bot.data import SearchHit
from ai_search_bot.errors import ProviderError
from ai_search_bot.search.exa import ExaSearchProvider, _snippet
from ai_search_bot.url import extract_domain


def _make_mock_result(
    url: str = "https://example.com/article",
    title: str | None = "Test Article",
    text: str | None = "Some page text.",
) -> MagicMock:
    """Create a mock Exa search result."""
    result = MagicMock()
    result.url = url
    result.title = title
    result.text = text
    return result


def _make_mock_response(results: list[MagicMock] | None = None) -> MagicMock:
    """Create a mock Exa search response."""
    response = MagicMock()
    response.results = (
        results
        if results is not None
        else [
            _make_mock_result(url="https://www.example.com/article1", title="Article 1"),
            _make_mock_result(url="https://other.com/article2", title="Article 2"),
        ]
    )
    return response


@pytest.fixture
def exa_provider() -> ExaSearchProvider:
    """Create a provider with test API key."""
    return ExaSearchProvider(api_key="test-key")


def test_init_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Should raise if no API key provided."""
    monkeypatch.delenv("EXA_API_KEY", raising=False)
    with pytest.raises(ValueError, match="API key required"):
        ExaSearchProvider()


def test_init_uses_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    """Should use EXA_API_KEY env var if no key passed."""
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    provider = ExaSearchProvider()
    assert provider._api_key == "env-key"


async def test_search_returns_hits(exa_provider: ExaSearchProvider) -> None:
    exa_provider._client.search_and_contents = AsyncMock(return_value=_make_mock_response())

    response = await exa_provider.search("test query")

    assert len(response.hits) == 2
    assert response.hits[0] == SearchHit(
        title="Article 1",
        url="https://www.example.com/article1",
        snippet="Some page text.",
        display_source="example.com",
    )
    assert response.metadata.total_results_label == "2"
    assert response.metadata.elapsed_seconds >= 0.0


async def test_search_passes_query_and_count(exa_provider: ExaSearchProvider) -> None:
    mock_search = AsyncMock(return_value=_make_mock_response([]))
    exa_provider._client.search_and_contents = mock_search

    await exa_provider.search("site:example.com docs")

    args, kwargs = mock_search.call_args
    assert args[0] == "site:example.com docs"
    assert kwargs["num_results"] == 10


async def test_search_handles_missing_title_and_text(exa_provider: ExaSearchProvider) -> None:
    result = _make_mock_result(title=None, text=None)
    exa_provider._client.search_and_contents = AsyncMock(
        return_value=_make_mock_response([result])
    )

    response = await exa_provider.search("query")

    assert response.hits[0].title == ""
    assert response.hits[0].snippet == ""


async def test_search_wraps_sdk_errors(exa_provider: ExaSearchProvider) -> None:
    exa_provider._client.search_and_contents = AsyncMock(side_effect=RuntimeError("quota"))
    with pytest.raises(ProviderError, match="quota"):
        await exa_provider.search("query")


def test_snippet_collapses_whitespace() -> None:
    assert _snippet("line one\n\n  line   two") == "line one line two"
    assert len(_snippet("x" * 1000)) == 300


def test_extract_domain() -> None:
    assert extract_domain("https://www.example.com/path") == "example.com"
    assert extract_domain("https://news.bbc.co.uk/article") == "news.bbc.co.uk"
    assert extract_domain("not-a-url") == "Unknown"
