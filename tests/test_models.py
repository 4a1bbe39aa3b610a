"""Tests for data models."""

import dataclasses

import pytest

from ai_search_bot.data import (
    Classification,
    EnrichedHit,
    MessagePayload,
    PayloadSection,
    QueryKind,
    SearchHit,
    SearchMetadata,
    SearchResponse,
)


def test_classification_defaults_to_plain() -> None:
    classification = Classification()
    assert classification.kind == QueryKind.PLAIN
    assert classification.context_description == ""
    assert not classification.is_operator_query


def test_operator_classification() -> None:
    classification = Classification(kind=QueryKind.OPERATOR, context_description="ctx")
    assert classification.is_operator_query


def test_search_hit_minimal() -> None:
    hit = SearchHit(title="T", url="https://t.example")
    assert hit.snippet == ""
    assert hit.display_source == ""


def test_enriched_hit_delegates_to_hit() -> None:
    hit = SearchHit(title="T", url="https://t.example", snippet="s", display_source="t.example")
    enriched = EnrichedHit(hit=hit, insight="Insight.")
    assert enriched.title == "T"
    assert enriched.url == "https://t.example"
    assert enriched.snippet == "s"
    assert enriched.display_source == "t.example"
    assert EnrichedHit(hit=hit).insight == ""


def test_search_response_defaults() -> None:
    response = SearchResponse()
    assert response.hits == ()
    assert response.metadata == SearchMetadata(total_results_label="0", elapsed_seconds=0.0)


def test_message_payload_defaults() -> None:
    payload = MessagePayload(body="hello")
    assert payload.use_rich_formatting
    assert payload.section == PayloadSection.NOTICE


def test_models_are_frozen() -> None:
    hit = SearchHit(title="T", url="https://t.example")
    with pytest.raises(dataclasses.FrozenInstanceError):
        hit.title = "changed"  # type: ignore[misc]
