"""Conversational front-end."""

from ai_search_bot.bot.router import SearchBot, match_command
from ai_search_bot.bot.texts import COMMAND_TEXTS

__all__ = [
    "COMMAND_TEXTS",
    "SearchBot",
    "match_command",
]
