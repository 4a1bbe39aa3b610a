"""Claude-based text generator."""

import os

import anthropic


class ClaudeGenerator:
    """Generate short commentary using Anthropic's Claude API.

    Args:
        model: Anthropic model ID to use.
        api_key: API key (defaults to CLAUDE_API_KEY env var).
    """

    def __init__(
        self,
        *,
        model: str = "claude-haiku-4-5-20251001",
        api_key: str | None = None,
    ) -> None:
        self._model = model
        resolved_key = api_key or os.environ.get("CLAUDE_API_KEY")
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key)

    async def generate(self, prompt: str, *, max_output_tokens: int) -> str:
        response = await self._client.messages.create(
            model=self._model,
            max_tokens=max_output_tokens,
            messages=[{"role": "user", "content": prompt}],
        )

        text = ""
        for block in response.content:
            if hasattr(block, "text"):
                text += block.text
        return text.strip()
