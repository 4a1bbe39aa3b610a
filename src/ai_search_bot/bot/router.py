"""Route incoming Telegram updates to command replies or the search pipeline."""

import logging
from typing import Any

from ai_search_bot.bot.texts import COMMAND_TEXTS
from ai_search_bot.classifier import classify
from ai_search_bot.compose import loading_notice
from ai_search_bot.data import MessagePayload, QueryState
from ai_search_bot.messaging.base import MessageChannel
from ai_search_bot.pipeline.base import QueryHandler

logger = logging.getLogger(__name__)


def match_command(text: str) -> str | None:
    """Return the reply text for a recognized command prefix, if any."""
    for command, reply in COMMAND_TEXTS.items():
        if text.startswith(command):
            return reply
    return None


class SearchBot:
    """Conversational front-end for the search pipeline.

    Args:
        pipeline: Query handler run for every non-command message.
        channel: Messaging channel for command replies and notices.
    """

    def __init__(self, pipeline: QueryHandler, channel: MessageChannel) -> None:
        self._pipeline = pipeline
        self._channel = channel

    @property
    def pipeline(self) -> QueryHandler:
        return self._pipeline

    @property
    def channel(self) -> MessageChannel:
        return self._channel

    async def handle_update(self, update: dict[str, Any]) -> QueryState | None:
        """Process one Telegram update.

        Args:
            update: Decoded update body as posted to the webhook.

        Returns:
            The pipeline's terminal state for search messages, otherwise None.
        """
        message = update.get("message") or {}
        text = message.get("text")
        if not text:
            return None
        chat_id = message["chat"]["id"]
        return await self.handle_text(chat_id, text)

    async def handle_text(self, chat_id: int | str, text: str) -> QueryState | None:
        reply = match_command(text)
        if reply is not None:
            await self._channel.send(chat_id, MessagePayload(body=reply, use_rich_formatting=False))
            return None

        if text.startswith("/"):
            logger.debug("Ignoring unknown command: %s", text)
            return None

        await self._channel.send(chat_id, loading_notice(classify(text)))
        return await self._pipeline.handle_query(chat_id, text)
