"""Pipeline module for answering search queries."""

from ai_search_bot.pipeline.base import QueryHandler
from ai_search_bot.pipeline.search import SearchPipeline

__all__ = [
    "QueryHandler",
    "SearchPipeline",
]
