"""Response composition module."""

from ai_search_bot.compose.formatter import (
    ERROR_NOTICE,
    compose,
    compose_combined,
    error_notice,
    loading_notice,
    no_results_notice,
)

__all__ = [
    "ERROR_NOTICE",
    "compose",
    "compose_combined",
    "error_notice",
    "loading_notice",
    "no_results_notice",
]
