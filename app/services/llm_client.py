"""Thin Groq chat-completions wrapper for meeting analysis."""

from __future__ import annotations

import logging

import httpx

from app.config.settings import settings
from app.services.http import create_http_client, extract_error_message

logger = logging.getLogger(__name__)


class LlmInvocationError(RuntimeError):
    """Raised when the chat completion call fails."""


class GroqLlmClient:
    """Invoke Groq-hosted chat models with standard configuration."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None,
        model: str,
        temperature: float,
        max_tokens: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client = create_http_client(base_url, api_key=api_key, transport=transport)

    async def invoke_json(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        model: str | None = None,
    ) -> str | None:
        """Run a chat completion constrained to a JSON object and return its text."""

        payload = {
            "model": model or self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature if temperature is not None else self._temperature,
            "max_tokens": max_tokens or self._max_tokens,
            "response_format": {"type": "json_object"},
        }

        try:
            response = await self._client.post("/chat/completions", json=payload)
        except httpx.HTTPError as exc:
            raise LlmInvocationError(str(exc)) from exc

        if response.is_error:
            raise LlmInvocationError(extract_error_message(response))

        try:
            body = response.json()
        except ValueError as exc:
            raise LlmInvocationError("Chat completion returned a non-JSON body") from exc

        choices = body.get("choices") if isinstance(body, dict) else None
        if not choices:
            return None
        message = choices[0].get("message") or {}
        content = message.get("content")
        return content or None

    async def aclose(self) -> None:
        await self._client.aclose()


def get_llm_client() -> GroqLlmClient:
    """Return the process-wide chat client singleton."""
    return _DEFAULT_CLIENT


_DEFAULT_CLIENT = GroqLlmClient(
    base_url=settings.groq.base_url,
    api_key=settings.groq.api_key.get_secret_value() if settings.groq.api_key else None,
    model=settings.groq.analysis_model,
    temperature=settings.groq.temperature,
    max_tokens=settings.groq.max_tokens,
)


__all__ = ["GroqLlmClient", "LlmInvocationError", "get_llm_client"]
