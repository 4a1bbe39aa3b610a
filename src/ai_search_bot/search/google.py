"""Google Custom Search JSON API provider."""

import logging
import os
from typing import Any

import httpx

from ai_search_bot.data import SearchHit, SearchMetadata, SearchResponse
from ai_search_bot.errors import ProviderError

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"

logger = logging.getLogger(__name__)


class GoogleSearchProvider:
    """Search the web through a Google Programmable Search Engine.

    Args:
        api_key: API key (defaults to GOOGLE_SEARCH_API_KEY env var).
        engine_id: Search engine ``cx`` (defaults to GOOGLE_SEARCH_ENGINE_ID env var).
        num_results: Results requested per call (the API caps this at 10).
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        engine_id: str | None = None,
        num_results: int = 10,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("GOOGLE_SEARCH_API_KEY")
        if not self._api_key:
            raise ValueError(
                "Google API key required. Pass api_key or set GOOGLE_SEARCH_API_KEY env var."
            )
        self._engine_id = engine_id or os.environ.get("GOOGLE_SEARCH_ENGINE_ID")
        if not self._engine_id:
            raise ValueError(
                "Google search engine ID required. "
                "Pass engine_id or set GOOGLE_SEARCH_ENGINE_ID env var."
            )
        self._num_results = min(max(num_results, 1), 10)
        self._timeout = timeout

    async def search(self, query: str) -> SearchResponse:
        params: dict[str, str | int] = {
            "key": self._api_key,
            "cx": self._engine_id,
            "q": query,
            "num": self._num_results,
        }
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(GOOGLE_SEARCH_URL, params=params)

        if not response.is_success:
            raise ProviderError(
                f"Google Search API error: {response.status_code}",
                status_code=response.status_code,
            )
        return _parse_response(response.json())


def _parse_response(data: dict[str, Any]) -> SearchResponse:
    """Convert a Custom Search JSON payload into a SearchResponse."""
    info = data.get("searchInformation")
    if not isinstance(info, dict):
        raise ProviderError("Google Search API response missing searchInformation")

    hits = tuple(
        SearchHit(
            title=item.get("title", ""),
            url=item["link"],
            snippet=item.get("snippet", ""),
            display_source=item.get("displayLink", ""),
        )
        for item in data.get("items") or []
        if item.get("link")
    )
    metadata = SearchMetadata(
        total_results_label=str(info.get("totalResults", "0")),
        elapsed_seconds=float(info.get("searchTime", 0.0)),
    )
    logger.debug("Google returned %d hits", len(hits))
    return SearchResponse(hits=hits, metadata=metadata)
