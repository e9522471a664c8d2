"""Tests for language detection and action-word translation."""

import pytest

from prompt_forge.engine.language import (
    ENGLISH,
    UNDETERMINED,
    detect_language,
    language_name,
    translate_action_words,
)


class TestDetectLanguage:
    @pytest.mark.parametrize("text", ["", "hi", "make it"])
    def test_short_text_undetermined(self, text):
        assert detect_language(text) == UNDETERMINED

    def test_too_few_hits_undetermined(self):
        assert detect_language("recursion algorithms quickly") == UNDETERMINED

    def test_english(self):
        assert detect_language("Please write a summary of the meeting for the team") == ENGLISH

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("crear una imagen de un gato para mi sitio web", "spa"),
            ("créer une image pour le site de mon entreprise", "fra"),
            ("erstelle ein bild für die webseite der firma", "deu"),
        ],
    )
    def test_other_languages(self, text, expected):
        assert detect_language(text) == expected


class TestLanguageName:
    def test_known(self):
        assert language_name("spa") == "Spanish"
        assert language_name("DEU") == "German"

    @pytest.mark.parametrize("code", ["xyz", "und", "", None])
    def test_unknown_maps_to_english(self, code):
        assert language_name(code) == "English"


class TestTranslateActionWords:
    def test_spanish_keeps_case(self):
        assert translate_action_words("Crear una imagen", "spa") == "Create una image"

    def test_only_table_words_change(self):
        assert translate_action_words("explica la recursión", "spa") == "explain la recursión"

    def test_unknown_language_unchanged(self):
        assert translate_action_words("crear una imagen", ENGLISH) == "crear una imagen"
