"""Utility to pull a JSON array out of an LLM completion."""

from __future__ import annotations

import json
import re

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


def extract_json_array(text: str) -> list:
    """Extract a JSON array from an LLM response.

    Tries in order:
    1. Direct json.loads on the full text
    2. The body of the first fenced code block
    3. First '[' to last ']' (greedy, so nested arrays survive)
    4. A single object, wrapped into a one-element list

    Raises ValueError when nothing parses to a list.
    """
    text = (text or "").strip()

    candidates = [text]
    fenced = _FENCE_RE.search(text)
    if fenced:
        candidates.append(fenced.group(1).strip())

    for candidate in candidates:
        data = _loads(candidate)
        if isinstance(data, list):
            return data

    for candidate in candidates:
        data = _loads(_slice(candidate, "[", "]"))
        if isinstance(data, list):
            return data

    for candidate in candidates:
        data = _loads(_slice(candidate, "{", "}"))
        if isinstance(data, dict):
            return [data]

    raise ValueError(f"Could not extract JSON array from text: {text[:200]}...")


def _loads(text: str | None):
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None


def _slice(text: str, opener: str, closer: str) -> str | None:
    start = text.find(opener)
    end = text.rfind(closer)
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]
