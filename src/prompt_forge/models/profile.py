"""Pydantic models for Input Analyzer output."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Intent(str, Enum):
    CREATE = "create"
    EXPLAIN = "explain"
    IMPROVE = "improve"
    ANALYZE = "analyze"


class Specificity(str, Enum):
    VAGUE = "vague"
    MODERATE = "moderate"
    DETAILED = "detailed"


class Domain(str, Enum):
    BUSINESS = "business"
    TECHNICAL = "technical"
    CREATIVE = "creative"
    ACADEMIC = "academic"
    PERSONAL = "personal"
    PROFESSIONAL = "professional"
    GENERAL = "general"


class Style(str, Enum):
    FORMAL = "formal"
    CASUAL = "casual"
    CREATIVE = "creative"
    TECHNICAL = "technical"
    PERSUASIVE = "persuasive"
    EDUCATIONAL = "educational"
    PROFESSIONAL = "professional"


class ContextFlag(str, Enum):
    NEEDS_EXPANSION = "needs_expansion"
    TIME_SENSITIVE = "time_sensitive"
    TEAM_REQUEST = "team_request"
    PROFESSIONAL_CONTEXT = "professional_context"


class InputProfile(BaseModel):
    """Structured classification of a free-text request."""

    topic: str = ""  # first 50 chars, "..." appended when truncated
    intent: Intent = Intent.CREATE
    specificity: Specificity = Specificity.VAGUE
    keywords: list[str] = Field(default_factory=list, max_length=10)
    domain: Domain = Domain.GENERAL
    style: Style = Style.PROFESSIONAL
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    context: frozenset[ContextFlag] = frozenset()

    model_config = {"frozen": True}

    def has_flag(self, flag: ContextFlag) -> bool:
        return flag in self.context
