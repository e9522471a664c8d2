"""Pydantic model for Input Enhancer output."""

from __future__ import annotations

from pydantic import BaseModel


class EnhancementResult(BaseModel):
    """Rewritten request plus one label per rule category that fired."""

    enhanced: str
    improvements: list[str]
    language: str = "English"  # display name of the detected input language

    model_config = {"frozen": True}
