"""Text generation backends."""

from ai_search_bot.generation.base import TextGenerator
from ai_search_bot.generation.claude import ClaudeGenerator
from ai_search_bot.generation.cloudflare import CloudflareGenerator

__all__ = [
    "ClaudeGenerator",
    "CloudflareGenerator",
    "TextGenerator",
]
