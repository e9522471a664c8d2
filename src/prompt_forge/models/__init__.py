"""Data models for the prompt engine."""

from prompt_forge.models.enhancement import EnhancementResult
from prompt_forge.models.profile import (
    ContextFlag,
    Domain,
    InputProfile,
    Intent,
    Specificity,
    Style,
)
from prompt_forge.models.template import Modality, PromptTemplate

__all__ = [
    "ContextFlag",
    "Domain",
    "EnhancementResult",
    "InputProfile",
    "Intent",
    "Modality",
    "PromptTemplate",
    "Specificity",
    "Style",
]
