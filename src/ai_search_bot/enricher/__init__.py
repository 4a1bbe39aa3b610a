"""Search result enrichment module."""

from ai_search_bot.enricher.base import ResultEnricher
from ai_search_bot.enricher.insights import FALLBACK_INSIGHT, MAX_ENRICHED_HITS, InsightEnricher

__all__ = [
    "FALLBACK_INSIGHT",
    "MAX_ENRICHED_HITS",
    "InsightEnricher",
    "ResultEnricher",
]
