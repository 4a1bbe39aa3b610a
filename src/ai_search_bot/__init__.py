"""AI Search Bot: chat search with operator detection and AI-annotated results."""

from ai_search_bot.bot import SearchBot
from ai_search_bot.classifier import classify, describe_operators, is_operator_query
from ai_search_bot.compose import compose, compose_combined
from ai_search_bot.config import BotConfig, create_from_config, load_config
from ai_search_bot.data import (
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
from ai_search_bot.delivery import DeliverySequencer
from ai_search_bot.enricher import InsightEnricher, ResultEnricher
from ai_search_bot.errors import DeliveryError, GenerationError, ProviderError, SearchBotError
from ai_search_bot.fallback import or_default
from ai_search_bot.generation import ClaudeGenerator, CloudflareGenerator, TextGenerator
from ai_search_bot.messaging import ConsoleChannel, MessageChannel, TelegramChannel
from ai_search_bot.pipeline import QueryHandler, SearchPipeline
from ai_search_bot.search import ExaSearchProvider, GoogleSearchProvider, SearchProvider
from ai_search_bot.url import extract_domain

__all__ = [
    # Models
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
    # Errors
    "DeliveryError",
    "GenerationError",
    "ProviderError",
    "SearchBotError",
    # Functions
    "classify",
    "compose",
    "compose_combined",
    "describe_operators",
    "extract_domain",
    "is_operator_query",
    "or_default",
    # Protocols
    "MessageChannel",
    "QueryHandler",
    "ResultEnricher",
    "SearchProvider",
    "TextGenerator",
    # Search providers
    "ExaSearchProvider",
    "GoogleSearchProvider",
    # Generators
    "ClaudeGenerator",
    "CloudflareGenerator",
    # Channels
    "ConsoleChannel",
    "TelegramChannel",
    # Pipeline
    "DeliverySequencer",
    "InsightEnricher",
    "SearchBot",
    "SearchPipeline",
    # Config
    "BotConfig",
    "create_from_config",
    "load_config",
]
