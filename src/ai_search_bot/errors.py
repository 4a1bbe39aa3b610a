"""Exception types raised by external collaborators."""


class SearchBotError(Exception):
    """Base class for all search bot errors."""


class ProviderError(SearchBotError):
    """The search provider call failed or returned an unusable response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GenerationError(SearchBotError):
    """The text-generation provider call failed."""


class DeliveryError(SearchBotError):
    """The messaging channel rejected or failed to deliver a message."""
