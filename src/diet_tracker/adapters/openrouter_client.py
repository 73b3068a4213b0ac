"""OpenRouter chat-completion client built on the OpenAI SDK."""

from dataclasses import dataclass

from openai import APIError, AsyncOpenAI

from diet_tracker.domain.errors import AnalysisError
from diet_tracker.services.analysis import ChatCompletionClient


@dataclass
class OpenRouterClient(ChatCompletionClient):
    """Chat-completion client for an OpenAI-compatible endpoint."""

    client: AsyncOpenAI

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        api_key: str,
        base_url: str,
        timeout_seconds: float,
        app_title: str | None = None,
        referer: str | None = None,
    ) -> "OpenRouterClient":
        """Create a client with a bounded timeout and no retries."""
        headers: dict[str, str] = {}
        if app_title:
            headers["X-Title"] = app_title
        if referer:
            headers["HTTP-Referer"] = referer
        return cls(
            client=AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout_seconds,
                max_retries=0,
                default_headers=headers or None,
            )
        )

    async def complete(
        self, *, model: str, messages: list[dict[str, object]], max_tokens: int
    ) -> str:
        """Return the first choice's message content."""
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
            )
        except APIError as exc:
            raise AnalysisError(f"AI provider error: {exc}") from exc
        if not response.choices:
            raise AnalysisError("AI provider returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise AnalysisError("AI provider returned an empty response")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
