"""Exa search using the official exa-py SDK."""

import logging
import os
import time

from exa_py import AsyncExa

from ai_search_bot.data import SearchHit, SearchMetadata, SearchResponse
from ai_search_bot.errors import ProviderError
from ai_search_bot.url import extract_domain

logger = logging.getLogger(__name__)

SNIPPET_MAX_CHARS = 300


class ExaSearchProvider:
    """Search for content using the Exa API.

    Exa does not report a total result count or server-side search time, so
    the metadata carries the number of returned results and locally measured
    elapsed time.

    Args:
        api_key: Exa API key (defaults to EXA_API_KEY env var).
        num_results: Results requested per call (default 10).
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        num_results: int = 10,
    ) -> None:
        self._api_key = api_key or os.environ.get("EXA_API_KEY")
        if not self._api_key:
            raise ValueError("Exa API key required. Pass api_key or set EXA_API_KEY env var.")
        self._num_results = num_results
        self._client = AsyncExa(api_key=self._api_key)

    async def search(self, query: str) -> SearchResponse:
        t0 = time.monotonic()
        try:
            response = await self._client.search_and_contents(
                query,
                num_results=self._num_results,
                text={"max_characters": SNIPPET_MAX_CHARS},
            )
        except Exception as e:
            raise ProviderError(f"Exa search failed: {e}") from e
        elapsed = time.monotonic() - t0

        hits: list[SearchHit] = []
        for result in response.results:
            hits.append(
                SearchHit(
                    title=result.title or "",
                    url=result.url,
                    snippet=_snippet(getattr(result, "text", None)),
                    display_source=extract_domain(result.url),
                )
            )

        metadata = SearchMetadata(
            total_results_label=str(len(hits)),
            elapsed_seconds=round(elapsed, 2),
        )
        return SearchResponse(hits=tuple(hits), metadata=metadata)


def _snippet(text: str | None) -> str:
    """Collapse whitespace in page text into a one-line snippet."""
    if not text:
        return ""
    return " ".join(text.split())[:SNIPPET_MAX_CHARS]
