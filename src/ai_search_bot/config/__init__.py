"""Configuration module for the search bot."""

from ai_search_bot.config.factory import create_from_config
from ai_search_bot.config.loader import get_default_config_path, load_config
from ai_search_bot.config.models import (
    BotConfig,
    ClaudeGeneratorConfig,
    CloudflareGeneratorConfig,
    DeliveryConfig,
    EnricherConfig,
    ExaSearchConfig,
    GeneratorConfig,
    GoogleSearchConfig,
    SearchConfig,
    TelegramConfig,
)

__all__ = [
    "BotConfig",
    "ClaudeGeneratorConfig",
    "CloudflareGeneratorConfig",
    "DeliveryConfig",
    "EnricherConfig",
    "ExaSearchConfig",
    "GeneratorConfig",
    "GoogleSearchConfig",
    "SearchConfig",
    "TelegramConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
