from typing import Protocol

from ai_search_bot.data import MessagePayload


class MessageChannel(Protocol):
    """Interface for delivering messages to a conversation."""

    async def send(self, target: int | str, payload: MessagePayload) -> None:
        """Send one message to the target chat.

        Args:
            target: Chat identifier.
            payload: Message body and formatting flag.

        Raises:
            DeliveryError: If the message was not accepted.
        """
        ...
