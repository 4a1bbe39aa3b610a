"""Telegram Bot API message channel."""

import logging
import os
from typing import Any

import httpx

from ai_search_bot.data import MessagePayload
from ai_search_bot.errors import DeliveryError

TELEGRAM_API_URL = "https://api.telegram.org/bot{token}/{method}"

logger = logging.getLogger(__name__)


class TelegramChannel:
    """Send messages through the Telegram Bot API.

    Args:
        bot_token: Bot token (defaults to TELEGRAM_BOT_TOKEN env var).
        disable_web_page_preview: Suppress link previews under messages.
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        *,
        bot_token: str | None = None,
        disable_web_page_preview: bool = True,
        timeout: float = 30.0,
    ) -> None:
        self._bot_token = bot_token or os.environ.get("TELEGRAM_BOT_TOKEN")
        if not self._bot_token:
            raise ValueError(
                "Telegram bot token required. Pass bot_token or set TELEGRAM_BOT_TOKEN env var."
            )
        self._disable_preview = disable_web_page_preview
        self._timeout = timeout

    async def send(self, target: int | str, payload: MessagePayload) -> None:
        body: dict[str, Any] = {
            "chat_id": target,
            "text": payload.body,
            "disable_web_page_preview": self._disable_preview,
        }
        if payload.use_rich_formatting:
            body["parse_mode"] = "Markdown"

        await self._call("sendMessage", body)

    async def set_webhook(self, url: str) -> dict[str, Any]:
        """Register the webhook URL Telegram should post updates to.

        Returns:
            The Bot API response body.
        """
        result = await self._call("setWebhook", {"url": url})
        logger.info("Webhook set to %s", url)
        return result

    async def _call(self, method: str, body: dict[str, Any]) -> dict[str, Any]:
        url = TELEGRAM_API_URL.format(token=self._bot_token, method=method)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(url, json=body)
        except httpx.HTTPError as e:
            raise DeliveryError(f"Telegram {method} request failed: {e}") from e

        if not response.is_success:
            raise DeliveryError(f"Telegram {method} error: {response.status_code}")
        data: dict[str, Any] = response.json()
        if not data.get("ok", False):
            raise DeliveryError(f"Telegram {method} rejected: {data.get('description')}")
        return data
