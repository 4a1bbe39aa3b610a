"""Search pipeline: classify, search, enrich, compose, deliver."""

import logging
import time

from ai_search_bot.classifier import classify
from ai_search_bot.compose import compose, compose_combined, error_notice, no_results_notice
from ai_search_bot.data import DeliveryOutcome, MessagePayload, QueryState
from ai_search_bot.delivery.sequencer import DeliverySequencer
from ai_search_bot.enricher.base import ResultEnricher
from ai_search_bot.fallback import or_default
from ai_search_bot.messaging.base import MessageChannel
from ai_search_bot.search.base import SearchProvider

logger = logging.getLogger(__name__)


class SearchPipeline:
    """Answer one query per call with a paced, multi-message response.

    Flow:
    1. Classify the query (plain or operator query)
    2. Search with the unmodified query text
    3. Enrich the top hits and summarize them
    4. Compose the header/overview/result/footer payloads
    5. Deliver them in order, falling back to one combined message

    Any exception before delivery starts is reported to the user as a single
    fixed error notice; nothing else from that query is sent.

    Args:
        searcher: Search provider.
        enricher: Result enricher.
        channel: Messaging channel for notices.
        sequencer: Delivery sequencer for the composed response.
    """

    def __init__(
        self,
        searcher: SearchProvider,
        enricher: ResultEnricher,
        channel: MessageChannel,
        sequencer: DeliverySequencer,
    ) -> None:
        self._searcher = searcher
        self._enricher = enricher
        self._channel = channel
        self._sequencer = sequencer

    async def handle_query(self, chat_target: int | str, query: str) -> QueryState:
        try:
            return await self._run(chat_target, query)
        except Exception:
            logger.exception("Search failed for chat %s", chat_target)
            await self._notify(chat_target, error_notice())
            return QueryState.FAILED

    async def _run(self, chat_target: int | str, query: str) -> QueryState:
        logger.info("Query from %s: %s", chat_target, query)

        classification = classify(query)
        state = QueryState.CLASSIFIED
        logger.debug("%s: %s", state, classification.kind)

        t0 = time.monotonic()
        response = await self._searcher.search(query)
        state = QueryState.SEARCHED
        logger.info("%s: %d hits in %.2fs", state, len(response.hits), time.monotonic() - t0)

        if not response.hits:
            await self._channel.send(chat_target, no_results_notice(classification))
            return QueryState.DELIVERED

        t0 = time.monotonic()
        enriched = await self._enricher.enrich_hits(response.hits, query, classification)
        summary = await self._enricher.summarize(query, enriched, classification)
        state = QueryState.ENRICHED
        logger.info("%s: %d hits in %.2fs", state, len(enriched), time.monotonic() - t0)

        payloads = compose(query, classification, enriched, response.metadata, summary)
        fallback = compose_combined(query, classification, enriched, response.metadata, summary)
        state = QueryState.COMPOSED
        logger.debug("%s: %d payloads", state, len(payloads))

        outcome = await self._sequencer.deliver(chat_target, payloads, fallback)
        if outcome == DeliveryOutcome.FAILED:
            return QueryState.FAILED
        return QueryState.DELIVERED

    async def _notify(self, chat_target: int | str, payload: MessagePayload) -> None:
        await or_default(
            self._send(chat_target, payload),
            False,
            label=f"Error notice to {chat_target}",
        )

    async def _send(self, chat_target: int | str, payload: MessagePayload) -> bool:
        await self._channel.send(chat_target, payload)
        return True
