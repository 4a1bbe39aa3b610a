"""Core data models for the search bot."""

from dataclasses import dataclass, field
from enum import StrEnum


class QueryKind(StrEnum):
    """Whether a query is plain keywords or uses search operators ("dorks")."""

    PLAIN = "plain"
    OPERATOR = "operator"


class PayloadSection(StrEnum):
    """Which part of a composed response a payload belongs to."""

    HEADER = "header"
    OVERVIEW = "overview"
    RESULT = "result"
    FOOTER = "footer"
    NOTICE = "notice"


class DeliveryOutcome(StrEnum):
    """How a composed response reached the chat."""

    SEQUENCE = "sequence"
    FALLBACK = "fallback"
    FAILED = "failed"


class QueryState(StrEnum):
    """Lifecycle of a single query through the pipeline.

    ``DELIVERED`` and ``FAILED`` are terminal.
    """

    RECEIVED = "received"
    CLASSIFIED = "classified"
    SEARCHED = "searched"
    ENRICHED = "enriched"
    COMPOSED = "composed"
    DELIVERED = "delivered"
    FAILED = "failed"


@dataclass(frozen=True)
class Classification:
    """Result of inspecting a query for search operators.

    ``context_description`` is only non-empty for operator queries.
    """

    kind: QueryKind = QueryKind.PLAIN
    context_description: str = ""

    @property
    def is_operator_query(self) -> bool:
        return self.kind == QueryKind.OPERATOR


@dataclass(frozen=True)
class SearchHit:
    """A single item returned by a search provider."""

    title: str
    url: str
    snippet: str = ""
    display_source: str = ""


@dataclass(frozen=True)
class EnrichedHit:
    """A search hit paired with its AI-generated insight."""

    hit: SearchHit
    insight: str = ""

    @property
    def title(self) -> str:
        return self.hit.title

    @property
    def url(self) -> str:
        return self.hit.url

    @property
    def snippet(self) -> str:
        return self.hit.snippet

    @property
    def display_source(self) -> str:
        return self.hit.display_source


@dataclass(frozen=True)
class SearchMetadata:
    """Provider-reported statistics, used only for display."""

    total_results_label: str = "0"
    elapsed_seconds: float = 0.0


@dataclass(frozen=True)
class SearchResponse:
    """Hits plus metadata for one provider call."""

    hits: tuple[SearchHit, ...] = ()
    metadata: SearchMetadata = field(default_factory=SearchMetadata)


@dataclass(frozen=True)
class MessagePayload:
    """One outbound chat message.

    ``section`` only influences pacing between sends; it is never rendered.
    """

    body: str
    use_rich_formatting: bool = True
    section: PayloadSection = PayloadSection.NOTICE
