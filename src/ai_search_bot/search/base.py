from typing import Protocol

from ai_search_bot.data import SearchResponse


class SearchProvider(Protocol):
    """Interface for keyword search backends."""

    async def search(self, query: str) -> SearchResponse:
        """Run a search for the raw query text.

        Operator syntax is passed through unchanged.

        Args:
            query: The user's query, unmodified.

        Returns:
            Ordered hits plus display metadata.

        Raises:
            ProviderError: If the remote call does not succeed.
        """
        ...
