"""Generator-backed enricher producing per-result insights and an overview."""

import asyncio
import logging
from collections.abc import Sequence

from ai_search_bot.data import Classification, EnrichedHit, SearchHit
from ai_search_bot.fallback import or_default
from ai_search_bot.generation.base import TextGenerator

logger = logging.getLogger(__name__)

MAX_ENRICHED_HITS = 3
INSIGHT_MAX_TOKENS = 120
SUMMARY_MAX_TOKENS = 180
FALLBACK_INSIGHT = "AI analysis unavailable."


def build_insight_prompt(snippet: str, original_query: str, classification: Classification) -> str:
    """Prompt asking how one result relates to the query."""
    context = classification.context_description
    if context:
        context_line = f"This is from a {context}."
    else:
        context_line = "This is from a regular search."

    prompt = (
        f"{context_line} Analyze this search result snippet in relation to the query "
        f'"{original_query}":\n\n'
        f'Snippet: "{snippet}"\n\n'
        "Provide a concise, informative summary (max 2 sentences) that explains how this "
        "result relates to the search query and highlights the key information."
    )
    if context:
        prompt += " Consider the advanced search context in your analysis."
    return prompt


def build_summary_prompt(
    original_query: str,
    enriched_hits: Sequence[EnrichedHit],
    classification: Classification,
) -> str:
    """Prompt asking for an overview across all results."""
    context = classification.context_description
    results_text = "\n\n".join(f"{h.title}: {h.snippet}" for h in enriched_hits)
    if context:
        context_line = f'This was a {context} for "{original_query}".'
    else:
        context_line = f'This was a search for "{original_query}".'

    prompt = (
        f"{context_line} Based on these search results, provide a brief overall summary "
        "(2-3 sentences) of what the user can learn about this topic:\n\n"
        f"{results_text}\n\n"
        "Focus on the main themes and key insights across all results."
    )
    if context:
        prompt += (
            " Consider how the advanced search parameters helped target specific information."
        )
    return prompt


class InsightEnricher:
    """Enrich search hits with short AI commentary.

    One generation call is issued per hit, concurrently; the overview call
    runs only after every per-hit call has resolved. Generation failures
    never propagate: insights fall back to a fixed phrase and the overview
    to an empty string.

    Args:
        generator: Text generation backend.
        insight_max_tokens: Output limit for each per-hit call.
        summary_max_tokens: Output limit for the overview call.
        fallback_insight: Insight used when generation fails or is empty.
    """

    def __init__(
        self,
        generator: TextGenerator,
        *,
        insight_max_tokens: int = INSIGHT_MAX_TOKENS,
        summary_max_tokens: int = SUMMARY_MAX_TOKENS,
        fallback_insight: str = FALLBACK_INSIGHT,
    ) -> None:
        self._generator = generator
        self._insight_max_tokens = insight_max_tokens
        self._summary_max_tokens = summary_max_tokens
        self._fallback_insight = fallback_insight

    async def enrich_hits(
        self,
        hits: Sequence[SearchHit],
        original_query: str,
        classification: Classification,
    ) -> list[EnrichedHit]:
        top_hits = list(hits[:MAX_ENRICHED_HITS])
        if not top_hits:
            return []

        # gather preserves input order regardless of completion order
        tasks = [self._insight_for(hit, original_query, classification) for hit in top_hits]
        insights = await asyncio.gather(*tasks)

        return [
            EnrichedHit(hit=hit, insight=insight)
            for hit, insight in zip(top_hits, insights, strict=True)
        ]

    async def summarize(
        self,
        original_query: str,
        enriched_hits: Sequence[EnrichedHit],
        classification: Classification,
    ) -> str:
        if not enriched_hits:
            return ""
        prompt = build_summary_prompt(original_query, enriched_hits, classification)
        return await or_default(
            self._generator.generate(prompt, max_output_tokens=self._summary_max_tokens),
            "",
            label="Overall summary generation",
        )

    async def _insight_for(
        self, hit: SearchHit, original_query: str, classification: Classification
    ) -> str:
        prompt = build_insight_prompt(hit.snippet, original_query, classification)
        return await or_default(
            self._generator.generate(prompt, max_output_tokens=self._insight_max_tokens),
            self._fallback_insight,
            label=f"Insight generation for {hit.url}",
        )
