"""Async Claude client used for streamed document generation."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass

import anthropic
from tenacity import retry, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"


@dataclass
class LLMResponse:
    text: str
    input_tokens: int
    output_tokens: int


@dataclass(frozen=True)
class TokenUsage:
    model: str
    input_tokens: int
    output_tokens: int


def _message_params(
    prompt: str, system: str, model: str, temperature: float, max_tokens: int
) -> dict:
    params: dict = {
        "model": model,
        "max_tokens": max_tokens,
        "temperature": temperature,
        "messages": [{"role": "user", "content": prompt}],
    }
    # The API rejects an empty system string
    if system:
        params["system"] = system
    return params


class LLMClient:
    """Thin wrapper over ``anthropic.AsyncAnthropic``.

    One-shot completions are retried with exponential backoff. Streams are
    not: once a chunk has reached the caller a retry would duplicate output.
    Token usage of every finished call is kept in ``usage`` until
    ``get_token_summary`` drains it.
    """

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        options: dict = {}
        if api_key is not None:
            options["api_key"] = api_key
        if timeout is not None:
            options["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**options)
        self.usage: list[TokenUsage] = []

    def _record(self, model: str, usage) -> TokenUsage:
        entry = TokenUsage(model, usage.input_tokens, usage.output_tokens)
        self.usage.append(entry)
        logger.debug(
            "Token usage (%s): %d in, %d out", model, entry.input_tokens, entry.output_tokens
        )
        return entry

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(min=1, max=10),
        reraise=True,
    )
    async def _create(self, params: dict) -> anthropic.types.Message:
        return await self.client.messages.create(**params)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        """Return the complete response text for one prompt."""
        params = _message_params(prompt, system, model, temperature, max_tokens)
        try:
            message = await self._create(params)
        except anthropic.APIError:
            logger.error("Completion failed (model=%s)", model, exc_info=True)
            raise
        entry = self._record(model, message.usage)
        text = "".join(block.text for block in message.content if hasattr(block, "text"))
        return LLMResponse(text, entry.input_tokens, entry.output_tokens)

    async def stream_text(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 4096,
    ) -> AsyncIterator[str]:
        """Yield text deltas as the model produces them."""
        params = _message_params(prompt, system, model, temperature, max_tokens)
        logger.debug("Opening stream (model=%s)", model)
        try:
            async with self.client.messages.stream(**params) as stream:
                async for delta in stream.text_stream:
                    yield delta
                final = await stream.get_final_message()
        except Exception:
            logger.error("Stream failed (model=%s)", model, exc_info=True)
            raise
        self._record(model, final.usage)

    def get_token_summary(self) -> dict:
        """Totals since the last call, then reset."""
        calls = [(u.model, u.input_tokens, u.output_tokens) for u in self.usage]
        self.usage = []
        return {
            "input": sum(c[1] for c in calls),
            "output": sum(c[2] for c in calls),
            "calls": calls,
        }
