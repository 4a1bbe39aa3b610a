"""Factory functions to create components from configuration."""

from ai_search_bot.bot.router import SearchBot
from ai_search_bot.config.models import (
    BotConfig,
    ClaudeGeneratorConfig,
    CloudflareGeneratorConfig,
    ExaSearchConfig,
    GoogleSearchConfig,
    TelegramConfig,
)
from ai_search_bot.delivery.sequencer import DeliverySequencer
from ai_search_bot.enricher.insights import InsightEnricher
from ai_search_bot.generation.base import TextGenerator
from ai_search_bot.generation.claude import ClaudeGenerator
from ai_search_bot.generation.cloudflare import CloudflareGenerator
from ai_search_bot.messaging.base import MessageChannel
from ai_search_bot.messaging.telegram import TelegramChannel
from ai_search_bot.pipeline.search import SearchPipeline
from ai_search_bot.search.base import SearchProvider
from ai_search_bot.search.exa import ExaSearchProvider
from ai_search_bot.search.google import GoogleSearchProvider


def create_search_provider(config: GoogleSearchConfig | ExaSearchConfig) -> SearchProvider:
    """Create a search provider from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, GoogleSearchConfig):
        return GoogleSearchProvider(num_results=config.num_results, timeout=config.timeout)
    if isinstance(config, ExaSearchConfig):
        return ExaSearchProvider(num_results=config.num_results)
    msg = f"Unknown search config type: {type(config)}"
    raise ValueError(msg)


def create_generator(
    config: ClaudeGeneratorConfig | CloudflareGeneratorConfig,
) -> TextGenerator:
    """Create a text generator from config."""
    if isinstance(config, ClaudeGeneratorConfig):
        return ClaudeGenerator(model=config.model)
    if isinstance(config, CloudflareGeneratorConfig):
        return CloudflareGenerator(model=config.model, timeout=config.timeout)
    msg = f"Unknown generator config type: {type(config)}"
    raise ValueError(msg)


def create_telegram_channel(config: TelegramConfig) -> TelegramChannel:
    """Create the Telegram channel from config."""
    return TelegramChannel(
        disable_web_page_preview=config.disable_web_page_preview,
        timeout=config.timeout,
    )


def create_from_config(
    config: BotConfig,
    *,
    channel: MessageChannel | None = None,
) -> SearchBot:
    """Create a complete bot from root config.

    Args:
        config: Root configuration.
        channel: Messaging channel to use instead of Telegram (e.g. console).

    Returns:
        A SearchBot wired to its pipeline.

    Raises:
        ValueError: If a required credential is missing.
    """
    resolved_channel = channel or create_telegram_channel(config.telegram)
    enricher = InsightEnricher(
        create_generator(config.generator),
        insight_max_tokens=config.enricher.insight_max_tokens,
        summary_max_tokens=config.enricher.summary_max_tokens,
        fallback_insight=config.enricher.fallback_insight,
    )
    sequencer = DeliverySequencer(
        resolved_channel,
        section_pause=config.delivery.section_pause_seconds,
        result_pause=config.delivery.result_pause_seconds,
    )
    pipeline = SearchPipeline(
        searcher=create_search_provider(config.search),
        enricher=enricher,
        channel=resolved_channel,
        sequencer=sequencer,
    )
    return SearchBot(pipeline, resolved_channel)
