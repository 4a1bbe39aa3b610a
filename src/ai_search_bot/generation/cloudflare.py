"""Cloudflare Workers AI text generator over the REST API."""

import os

import httpx

from ai_search_bot.errors import GenerationError

CLOUDFLARE_AI_URL = "https://api.cloudflare.com/client/v4/accounts/{account_id}/ai/run/{model}"


class CloudflareGenerator:
    """Generate text with a Workers AI hosted model.

    Args:
        model: Workers AI model name.
        account_id: Cloudflare account ID (defaults to CLOUDFLARE_ACCOUNT_ID env var).
        api_token: API token (defaults to CLOUDFLARE_API_TOKEN env var).
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        *,
        model: str = "@cf/meta/llama-3.1-8b-instruct",
        account_id: str | None = None,
        api_token: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._account_id = account_id or os.environ.get("CLOUDFLARE_ACCOUNT_ID")
        self._api_token = api_token or os.environ.get("CLOUDFLARE_API_TOKEN")
        if not self._account_id or not self._api_token:
            raise ValueError(
                "Cloudflare credentials required. Pass account_id and api_token or set "
                "CLOUDFLARE_ACCOUNT_ID and CLOUDFLARE_API_TOKEN env vars."
            )
        self._model = model
        self._timeout = timeout

    async def generate(self, prompt: str, *, max_output_tokens: int) -> str:
        url = CLOUDFLARE_AI_URL.format(account_id=self._account_id, model=self._model)
        payload = {
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_output_tokens,
        }
        headers = {"Authorization": f"Bearer {self._api_token}"}

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.post(url, json=payload, headers=headers)
        response.raise_for_status()
        data = response.json()

        if not data.get("success", True):
            raise GenerationError(f"Workers AI error: {data.get('errors')}")
        result = data.get("result") or {}
        return str(result.get("response") or "").strip()
