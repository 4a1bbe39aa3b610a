from ai_search_bot.search.base import SearchProvider
from ai_search_bot.search.exa import ExaSearchProvider
from ai_search_bot.search.google import GoogleSearchProvider

__all__ = [
    "ExaSearchProvider",
    "GoogleSearchProvider",
    "SearchProvider",
]
