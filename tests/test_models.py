"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from prompt_forge.models import (
    ContextFlag,
    EnhancementResult,
    InputProfile,
    Modality,
    PromptTemplate,
)


class TestModality:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (Modality.IMAGE, Modality.IMAGE),
            ("image", Modality.IMAGE),
            (" Code ", Modality.CODE),
            ("VIDEO", Modality.VIDEO),
            ("hologram", Modality.TEXT),
            ("", Modality.TEXT),
            (None, Modality.TEXT),
        ],
    )
    def test_parse(self, value, expected):
        assert Modality.parse(value) is expected

    def test_str_enum_values(self):
        assert [m.value for m in Modality] == ["text", "image", "code", "audio", "video"]


class TestInputProfile:
    def test_defaults(self):
        profile = InputProfile()
        assert profile.confidence == 0.5
        assert profile.context == frozenset()
        assert not profile.has_flag(ContextFlag.NEEDS_EXPANSION)

    def test_keyword_limit(self):
        with pytest.raises(ValidationError):
            InputProfile(keywords=[f"k{i}" for i in range(11)])

    @pytest.mark.parametrize("confidence", [-0.1, 1.01])
    def test_confidence_bounds(self, confidence):
        with pytest.raises(ValidationError):
            InputProfile(confidence=confidence)

    def test_has_flag(self):
        profile = InputProfile(context=frozenset({ContextFlag.TEAM_REQUEST}))
        assert profile.has_flag(ContextFlag.TEAM_REQUEST)
        assert not profile.has_flag(ContextFlag.TIME_SENSITIVE)


class TestEnhancementResult:
    def test_default_language(self):
        result = EnhancementResult(enhanced="Hi.", improvements=["Added ending punctuation"])
        assert result.language == "English"

    def test_frozen(self):
        result = EnhancementResult(enhanced="", improvements=[])
        with pytest.raises(ValidationError):
            result.enhanced = "changed"


class TestPromptTemplate:
    def test_roundtrip_dump(self):
        template = PromptTemplate(title="Photorealistic", prompt="A cat")
        assert template.model_dump() == {"title": "Photorealistic", "prompt": "A cat"}

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            PromptTemplate(title="only title")
