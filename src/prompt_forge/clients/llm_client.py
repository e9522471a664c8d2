"""Claude API wrapper for the remote prompt-optimization path."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anthropic
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from prompt_forge.errors import CompletionError, QuotaExceededError, RateLimitError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Async Claude API client.

    Requests are single-shot by default. ``max_attempts > 1`` enables
    exponential-backoff retries for transport failures only; rate-limit and
    quota responses are never retried.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        max_attempts: int = 1,
    ):
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.max_attempts = max(1, max_attempts)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def _call_api(
        self,
        prompt: str,
        system: str,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> anthropic.types.Message:
        """Make the actual API call, retrying transport errors if configured."""
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(min=1, max=10),
            retry=retry_if_exception_type(anthropic.APIConnectionError),
            reraise=True,
        ):
            with attempt:
                return await self.client.messages.create(**kwargs)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage.

        Raises:
            RateLimitError: HTTP 429.
            QuotaExceededError: HTTP 402.
            CompletionError: any other API status, timeout, transport
                failure, or an empty completion.
        """
        logger.debug("LLM call: model=%s", model)
        try:
            message = await self._call_api(
                prompt=prompt,
                system=system,
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except anthropic.APIStatusError as exc:
            logger.error("AI gateway error: %s", exc.status_code, exc_info=True)
            if exc.status_code == 429:
                raise RateLimitError() from exc
            if exc.status_code == 402:
                raise QuotaExceededError() from exc
            raise CompletionError(status_code=exc.status_code) from exc
        except anthropic.APITimeoutError as exc:
            logger.error("LLM call timed out", exc_info=True)
            raise CompletionError("AI prompt optimization timed out") from exc
        except anthropic.APIConnectionError as exc:
            logger.error("LLM call failed", exc_info=True)
            raise CompletionError("Could not reach the AI service") from exc

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))

        text = "".join(getattr(block, "text", "") for block in message.content).strip()
        if not text:
            raise CompletionError("No content returned from AI")
        return LLMResponse(
            text=text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
