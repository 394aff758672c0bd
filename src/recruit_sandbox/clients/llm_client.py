"""Claude API wrapper with async support, streaming and retry logic."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from dataclasses import dataclass

import anthropic
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from recruit_sandbox.errors import ConfigurationError, TransportError
from recruit_sandbox.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"

# Transport faults worth another attempt. Everything else surfaces at once.
# Timeouts (an APIConnectionError subclass) are not retried.
_RETRYABLE = (
    anthropic.APIConnectionError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
)


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


def _response_text(message: anthropic.types.Message) -> str:
    """Concatenate the text blocks of a message, skipping thinking blocks."""
    return "".join(
        block.text for block in message.content if getattr(block, "type", None) == "text"
    )


class LLMClient:
    """Async Claude API client with jittered exponential-backoff retries."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        max_retries: int = 3,
    ):
        key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not key:
            raise ConfigurationError(
                "Anthropic API key required. Set ANTHROPIC_API_KEY env var or pass api_key."
            )
        kwargs: dict = {"api_key": key, "max_retries": 0}
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.max_retries = max_retries
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    @staticmethod
    def _request_kwargs(
        *,
        messages: list[dict],
        system: str,
        model: str,
        max_tokens: int,
        thinking_budget: int,
    ) -> dict:
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": messages,
        }
        if system:
            kwargs["system"] = system
        if thinking_budget:
            kwargs["thinking"] = {"type": "enabled", "budget_tokens": thinking_budget}
        return kwargs

    async def _call_api(self, **kwargs) -> anthropic.types.Message:
        """Make the actual API call, retrying transport faults.

        Goes through the streaming endpoint and waits for the final message:
        long thinking budgets exceed what the SDK allows for a plain request.
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_random_exponential(multiplier=0.5, max=10),
                retry=(
                    retry_if_exception_type(_RETRYABLE)
                    & retry_if_not_exception_type(anthropic.APITimeoutError)
                ),
                reraise=True,
            ):
                with attempt:
                    if attempt.retry_state.attempt_number > 1:
                        logger.info(
                            "Retrying LLM call (attempt %d/%d)",
                            attempt.retry_state.attempt_number,
                            self.max_retries,
                        )
                    async with self.client.messages.stream(**kwargs) as stream:
                        return await stream.get_final_message()
        except anthropic.APIError as e:
            raise TransportError(f"LLM request failed: {e}") from e

    async def generate(
        self,
        content: str | list[dict],
        system: str = "",
        model: str = DEFAULT_MODEL,
        max_tokens: int = 32000,
        thinking_budget: int = 0,
    ) -> LLMResponse:
        """Send one user turn (text or content blocks) and return the text response."""
        logger.debug("LLM call: model=%s thinking_budget=%d", model, thinking_budget)
        kwargs = self._request_kwargs(
            messages=[{"role": "user", "content": content}],
            system=system,
            model=model,
            max_tokens=max_tokens,
            thinking_budget=thinking_budget,
        )
        try:
            message = await self._call_api(**kwargs)
        except TransportError:
            logger.error("LLM call failed", exc_info=True)
            raise
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))
        return LLMResponse(
            text=_response_text(message),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    async def generate_json(
        self,
        content: str | list[dict],
        system: str = "",
        model: str = DEFAULT_MODEL,
        max_tokens: int = 32000,
        thinking_budget: int = 0,
        empty: dict | list | None = None,
    ) -> dict | list:
        """Send a prompt and parse JSON from the response.

        An empty body parses to ``empty`` rather than failing here.
        """
        response = await self.generate(
            content,
            system=system,
            model=model,
            max_tokens=max_tokens,
            thinking_budget=thinking_budget,
        )
        return extract_json(response.text, empty=empty)

    async def stream_text(
        self,
        messages: list[dict],
        system: str = "",
        model: str = DEFAULT_MODEL,
        max_tokens: int = 32000,
        thinking_budget: int = 0,
    ) -> AsyncIterator[str]:
        """Stream the assistant's reply to a multi-turn conversation.

        Yields text fragments in arrival order. Streams are not retried: a
        fault after the first fragment would duplicate delivered text.
        """
        logger.debug("LLM stream: model=%s turns=%d", model, len(messages))
        kwargs = self._request_kwargs(
            messages=messages,
            system=system,
            model=model,
            max_tokens=max_tokens,
            thinking_budget=thinking_budget,
        )
        try:
            async with self.client.messages.stream(**kwargs) as stream:
                async for text in stream.text_stream:
                    yield text
                final = await stream.get_final_message()
        except anthropic.APIError as e:
            logger.error("LLM stream failed", exc_info=True)
            raise TransportError(f"LLM stream failed: {e}") from e
        self._token_log.append((model, final.usage.input_tokens, final.usage.output_tokens))

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
