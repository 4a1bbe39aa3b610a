"""Outbound message channels."""

from ai_search_bot.messaging.base import MessageChannel
from ai_search_bot.messaging.console import ConsoleChannel
from ai_search_bot.messaging.telegram import TelegramChannel

__all__ = [
    "ConsoleChannel",
    "MessageChannel",
    "TelegramChannel",
]
