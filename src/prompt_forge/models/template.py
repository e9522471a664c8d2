"""Pydantic models for generated prompt variants."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class Modality(str, Enum):
    """Target output type of the generative AI a prompt is written for."""

    TEXT = "text"
    IMAGE = "image"
    CODE = "code"
    AUDIO = "audio"
    VIDEO = "video"

    @classmethod
    def parse(cls, value: Modality | str | None) -> Modality:
        """Map any value to a modality, falling back to TEXT."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.TEXT


class PromptTemplate(BaseModel):
    """A single copy-paste-ready prompt variant."""

    title: str
    prompt: str

    model_config = {"frozen": True}
