"""Pipeline protocol for answering one search query."""

from typing import Protocol

from ai_search_bot.data import QueryState


class QueryHandler(Protocol):
    """Interface for the end-to-end query pipeline."""

    async def handle_query(self, chat_target: int | str, query: str) -> QueryState:
        """Answer a query in the given chat.

        Args:
            chat_target: Chat identifier to reply to.
            query: Raw query text (non-empty, not a command).

        Returns:
            The terminal state, ``DELIVERED`` or ``FAILED``.
        """
        ...
