"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from prompt_forge.clients.llm_client import LLMClient, LLMResponse


@pytest.fixture
def sample_requests() -> list[str]:
    return [
        "make me a logo",
        "explain how recursion works",
        "build a REST API for a todo app",
        "a cat sitting on a windowsill at sunset",
        "we need a quarterly marketing report for the client today",
        "",
    ]


@pytest.fixture
def sample_completion() -> str:
    return json.dumps([
        {"title": "Quick & Direct", "prompt": "Write a haiku about autumn."},
        {"title": "Detailed & Professional", "prompt": "You are a poet. Write a 3-line haiku about autumn leaves."},
        {"title": "Creative & Enhanced", "prompt": "Paint autumn in 17 syllables, with falling maple leaves."},
    ])


@pytest.fixture
def mock_llm_client(sample_completion) -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text=sample_completion, input_tokens=120, output_tokens=80)
    )
    client.get_token_summary = MagicMock(
        return_value={"input": 120, "output": 80, "calls": [("claude-haiku-4-5-20251001", 120, 80)]}
    )
    return client
