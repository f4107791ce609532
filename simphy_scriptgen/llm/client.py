from __future__ import annotations

from typing import Any, Protocol

from openai import AsyncOpenAI, OpenAIError  # type: ignore[import]

from simphy_scriptgen.core.config import Settings
from simphy_scriptgen.core.models import sampling_parameters


class UpstreamError(RuntimeError):
    """Raised when the text-generation service fails or returns no text."""


class ChatBackend(Protocol):
    """Anything that can turn chat messages into generated text."""

    async def complete(self, messages: list[dict[str, str]]) -> str: ...


class LLMClient:
    """Thin wrapper around an OpenAI-compatible async client."""

    def __init__(self, settings: Settings, client: Any = None) -> None:
        self.settings = settings
        self.model = settings.model_name
        self.client = client or AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url.rstrip("/")
            if settings.openai_base_url
            else None,
            max_retries=0,
        )

    async def complete(self, messages: list[dict[str, str]]) -> str:
        """Send one chat-completion request and return the text unchanged."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                **sampling_parameters(self.model),
            )
        except OpenAIError as exc:
            raise UpstreamError(f"Chat completion failed: {exc}") from exc
        return self._extract_output_text(response)

    @staticmethod
    def _extract_output_text(response: Any) -> str:
        """Return the first choice's message text; an empty string is a valid reply."""
        choices = getattr(response, "choices", None)
        if not choices:
            raise UpstreamError("Could not find text in the model response.")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            raise UpstreamError("Completion response missing message content.")
        return content
