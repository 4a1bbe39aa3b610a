from typing import Protocol


class TextGenerator(Protocol):
    """Interface for language-model text generation."""

    async def generate(self, prompt: str, *, max_output_tokens: int) -> str:
        """Generate a completion for a single user prompt.

        Args:
            prompt: The full user prompt.
            max_output_tokens: Upper bound on generated tokens.

        Returns:
            Generated text, possibly empty.
        """
        ...
