"""Shared fakes for search bot tests."""

from collections.abc import Callable

import pytest

from ai_search_bot.data import MessagePayload, SearchHit
from ai_search_bot.errors import DeliveryError


class RecordingChannel:
    """Message channel that records sends and can fail on chosen calls."""

    def __init__(self, fail_on: set[int] | None = None) -> None:
        self.sent: list[tuple[int | str, MessagePayload]] = []
        self.attempts = 0
        self._fail_on = fail_on or set()

    async def send(self, target: int | str, payload: MessagePayload) -> None:
        attempt = self.attempts
        self.attempts += 1
        if attempt in self._fail_on:
            raise DeliveryError(f"send {attempt} failed")
        self.sent.append((target, payload))

    @property
    def bodies(self) -> list[str]:
        return [payload.body for _, payload in self.sent]


class FakeGenerator:
    """Text generator returning canned text, optionally failing per prompt."""

    def __init__(
        self,
        reply: str = "Relevant insight.",
        summary: str = "Overall these results cover the topic.",
        fail_when: Callable[[str], bool] | None = None,
    ) -> None:
        self.calls: list[tuple[str, int]] = []
        self._reply = reply
        self._summary = summary
        self._fail_when = fail_when

    async def generate(self, prompt: str, *, max_output_tokens: int) -> str:
        self.calls.append((prompt, max_output_tokens))
        if self._fail_when is not None and self._fail_when(prompt):
            raise RuntimeError("model unavailable")
        if "overall summary" in prompt:
            return self._summary
        return self._reply


def make_hits(count: int) -> tuple[SearchHit, ...]:
    return tuple(
        SearchHit(
            title=f"Result {i}",
            url=f"https://example.com/{i}",
            snippet=f"Snippet number {i}",
            display_source="example.com",
        )
        for i in range(1, count + 1)
    )


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()
