"""Tests for the Input Enhancer rule pipeline."""

import pytest

from prompt_forge.config import EnhancerConfig
from prompt_forge.engine.enhancer import (
    CONTENT_RULES,
    EXAMPLES_REQUEST,
    FALLBACK_GUIDANCE,
    FALLBACK_LABEL,
    METRICS_REQUEST,
    SPECIFICITY_REQUEST,
    SURFACE_RULES,
    enhance_input,
)
from prompt_forge.models.enhancement import EnhancementResult


class TestEmptyInput:
    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty_returns_empty_result(self, text):
        result = enhance_input(text)
        assert result == EnhancementResult(enhanced="", improvements=[])

    @pytest.mark.parametrize(
        "text",
        [
            ".",
            "?",
            "make me a logo",
            "Write a detailed summary of the quarterly numbers.",
            "日本語のテキスト",
            "x" * 500,
            "İm here",
            "buiſneſs plan",
            "doeſnt work here",
            "wrİte",
        ],
    )
    def test_non_empty_always_improves(self, text):
        result = enhance_input(text)
        assert result.enhanced
        assert len(result.improvements) >= 1


class TestShortRequests:
    def test_make_me_a_logo(self):
        result = enhance_input("make me a logo")
        assert result.enhanced == "Make a comprehensive logo. " + SPECIFICITY_REQUEST
        assert result.enhanced.startswith("Make")
        assert result.enhanced.endswith((".", "!", "?"))
        assert result.improvements == [
            "Capitalized first letter",
            "Added ending punctuation",
            "Expanded brief request with smart context",
            "Requested specific, detailed output",
        ]

    def test_explain_lead(self):
        result = enhance_input("explain AI")
        assert result.enhanced == "Provide a clear, detailed explanation of AI."
        assert "Expanded brief request with smart context" in result.improvements

    def test_improve_lead_with_technical_context(self):
        result = enhance_input("fix my code")
        assert result.enhanced == (
            "Suggest specific improvements for my code. "
            "Include technical specifications, constraints, and implementation details. "
            + EXAMPLES_REQUEST
        )
        assert result.improvements == [
            "Capitalized first letter",
            "Added ending punctuation",
            "Expanded brief request with smart context",
            "Added technical domain context",
            "Requested practical examples",
        ]

    def test_threshold_configurable(self):
        result = enhance_input("make me a logo", EnhancerConfig(short_request_chars=0))
        assert result.enhanced.startswith("Make me a logo.")
        assert "Expanded brief request with smart context" not in result.improvements


class TestVagueRequests:
    def test_bare_verb(self):
        result = enhance_input("make")
        assert result.enhanced == (
            "Make something specific, describing its purpose, audience, and format. "
            + SPECIFICITY_REQUEST
        )
        assert "Expanded vague request with guidance" in result.improvements
        assert "Expanded brief request with smart context" not in result.improvements

    def test_help_me(self):
        result = enhance_input("help me")
        assert result.enhanced.startswith(
            "Help me with a clearly defined task, including the relevant context and the desired outcome."
        )


class TestCleanup:
    def test_spelling(self):
        result = enhance_input("teh weather report for tommorow")
        assert result.enhanced.startswith("The weather report for tomorrow.")
        assert "Fixed spelling errors" in result.improvements

    def test_collapses_spaces(self):
        result = enhance_input("write a short poem   about the sea  please")
        assert "  " not in result.enhanced
        assert "Normalized spacing and punctuation" in result.improvements

    def test_space_after_sentence(self):
        result = enhance_input("write a poem.Make it rhyme")
        assert "poem. Make it rhyme" in result.enhanced

    def test_informal_words(self):
        result = enhance_input("u gonna help me write a cover letter kinda fast")
        assert result.enhanced.startswith("You going to help me write a cover letter somewhat fast.")
        assert "Converted casual language to professional tone" in result.improvements

    def test_abbreviation_untouched(self):
        result = enhance_input("summarize U.S. tax rules for freelancers")
        assert "U.S." in result.enhanced
        assert "You" not in result.enhanced

    def test_contractions(self):
        result = enhance_input("i cant decide what to cook tonight for dinner")
        assert result.enhanced.startswith("I can't decide")
        assert "Applied grammar and style corrections" in result.improvements

    def test_multi_part_request_bulleted(self):
        result = enhance_input("write a blog post; add three images; include a call to action")
        assert result.enhanced.startswith(
            "Address the following points:\n"
            "- Write a blog post.\n"
            "- add three images.\n"
            "- include a call to action."
        )
        assert "Restructured multi-part request into bullet points" in result.improvements

    def test_bullets_keep_ending_punctuation(self):
        result = enhance_input("a;b;c")
        assert result.enhanced.startswith("Address the following points:\n- A.\n- b.\n- c.")
        assert "Added ending punctuation" in result.improvements

    def test_case_folded_lookalikes_untouched(self):
        # "ſ" folds to "s" under IGNORECASE but is not a dictionary word
        result = enhance_input("doeſnt work here on the staging server")
        assert result.enhanced.startswith("Doeſnt work here on the staging server.")
        assert "Applied grammar and style corrections" not in result.improvements

    def test_dotted_capital_i_untouched(self):
        result = enhance_input("İm looking for a Turkish recipe blog")
        assert result.enhanced.startswith("İm looking for a Turkish recipe blog.")


class TestSymbolOnlyInput:
    @pytest.mark.parametrize("text", [".", "...", "?!", "--"])
    def test_falls_back_to_guidance(self, text):
        result = enhance_input(text)
        assert result == EnhancementResult(enhanced=FALLBACK_GUIDANCE, improvements=[FALLBACK_LABEL])


class TestEnrichment:
    def test_business_context_and_metrics(self):
        result = enhance_input("write a marketing plan for a new coffee shop")
        assert "Added business domain context" in result.improvements
        assert "Requested success metrics" in result.improvements
        assert result.enhanced.endswith(METRICS_REQUEST)

    def test_style_guidance_needs_confidence(self):
        result = enhance_input(
            "Write a compelling sales pitch for our new software product launch next week"
        )
        assert "Added persuasive style guidance" in result.improvements
        assert "Use persuasive language with a clear call to action." in result.enhanced

    def test_context_requirements(self):
        result = enhance_input("we need the report today")
        assert "Added context-specific requirements" in result.improvements
        assert "Prioritize a fast, actionable answer that fits a tight timeline." in result.enhanced
        assert "Frame the output so a team can review and collaborate on it." in result.enhanced

    def test_fallback_guidance(self):
        result = enhance_input("Write a detailed summary of the quarterly numbers.")
        assert result.improvements == ["Added general optimization guidance"]
        assert result.enhanced == (
            "Write a detailed summary of the quarterly numbers. " + FALLBACK_GUIDANCE
        )


class TestLocale:
    def test_spanish_input(self):
        result = enhance_input("crear una imagen de un gato para mi sitio web")
        assert result.language == "Spanish"
        assert result.improvements[0] == "Detected Spanish input"
        assert result.enhanced.startswith("Create una image de un gato")
        assert result.enhanced.endswith("Respond in Spanish, following its regional conventions.")

    def test_english_language_name(self):
        assert enhance_input("make me a logo").language == "English"


class TestRuleTable:
    def test_rule_names_unique(self):
        names = [rule.name for rule in SURFACE_RULES + CONTENT_RULES]
        assert len(names) == len(set(names))

    def test_labels_unique_per_call(self, sample_requests):
        for text in sample_requests:
            improvements = enhance_input(text).improvements
            assert len(improvements) == len(set(improvements))

    def test_deterministic(self, sample_requests):
        for text in sample_requests:
            assert enhance_input(text) == enhance_input(text)
