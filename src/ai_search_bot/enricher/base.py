"""Protocol for search result enrichment."""

from collections.abc import Sequence
from typing import Protocol

from ai_search_bot.data import Classification, EnrichedHit, SearchHit


class ResultEnricher(Protocol):
    """Interface for attaching AI commentary to search hits."""

    async def enrich_hits(
        self,
        hits: Sequence[SearchHit],
        original_query: str,
        classification: Classification,
    ) -> list[EnrichedHit]:
        """Attach a short insight to each of the leading hits.

        Args:
            hits: Hits in provider order.
            original_query: The user's query text.
            classification: Classification of the query.

        Returns:
            Enriched hits in the same order, capped at the enrichment limit.
        """
        ...

    async def summarize(
        self,
        original_query: str,
        enriched_hits: Sequence[EnrichedHit],
        classification: Classification,
    ) -> str:
        """Produce an overview across all enriched hits, or ``""`` if unavailable."""
        ...
