"""Exception hierarchy for the remote completion path."""

from __future__ import annotations


class PromptForgeError(Exception):
    """Base class for all prompt-forge errors."""


class CompletionError(PromptForgeError):
    """The remote completion service failed to produce a usable answer."""

    def __init__(self, message: str = "AI prompt optimization failed", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(CompletionError):
    """HTTP 429 from the completion service. Not retried automatically."""

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message, status_code=429)


class QuotaExceededError(CompletionError):
    """HTTP 402 from the completion service: credits are exhausted."""

    def __init__(self, message: str = "AI credits exhausted. Please add funds to your workspace."):
        super().__init__(message, status_code=402)
