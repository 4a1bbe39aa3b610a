"""Data models for the search bot."""

from ai_search_bot.data.models import (
    Classification,
    DeliveryOutcome,
    EnrichedHit,
    MessagePayload,
    PayloadSection,
    QueryKind,
    QueryState,
    SearchHit,
    SearchMetadata,
    SearchResponse,
)

__all__ = [
    "Classification",
    "DeliveryOutcome",
    "EnrichedHit",
    "MessagePayload",
    "PayloadSection",
    "QueryKind",
    "QueryState",
    "SearchHit",
    "SearchMetadata",
    "SearchResponse",
]
