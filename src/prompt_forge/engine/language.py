"""Lightweight language detection and action-word translation for non-English input.

Detection counts hits against small sets of high-frequency function words per
language and returns an ISO 639-3 code. Translation only rewrites the action
words the rest of the engine keys on (``crear`` -> ``create``), leaving the
subject matter of the request untouched.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType

logger = logging.getLogger(__name__)

ENGLISH = "eng"
UNDETERMINED = "und"
MIN_DETECT_CHARS = 10
MIN_HITS = 2

LANGUAGE_NAMES = MappingProxyType({
    "eng": "English",
    "spa": "Spanish",
    "fra": "French",
    "deu": "German",
    "por": "Portuguese",
    "ita": "Italian",
    "nld": "Dutch",
})

FUNCTION_WORDS = MappingProxyType({
    "eng": frozenset({"the", "and", "is", "of", "to", "for", "with", "that", "this", "me", "my", "a", "an"}),
    "spa": frozenset({"el", "la", "los", "las", "de", "del", "que", "y", "para", "con", "una", "un", "por", "es", "mi"}),
    "fra": frozenset({"le", "la", "les", "des", "du", "et", "pour", "avec", "une", "un", "est", "que", "moi", "mon"}),
    "deu": frozenset({"der", "die", "das", "und", "ist", "mit", "für", "ein", "eine", "mich", "mir", "zu", "den"}),
    "por": frozenset({"o", "os", "as", "do", "da", "dos", "que", "e", "para", "com", "uma", "um", "não", "meu"}),
    "ita": frozenset({"il", "lo", "gli", "della", "di", "che", "e", "per", "con", "una", "un", "è", "mio", "mi"}),
    "nld": frozenset({"de", "het", "een", "en", "van", "voor", "met", "is", "dat", "mij", "mijn", "te"}),
})

ACTION_WORDS = MappingProxyType({
    "spa": MappingProxyType({
        "crear": "create", "crea": "create", "escribir": "write", "escribe": "write",
        "explicar": "explain", "explica": "explain", "mejorar": "improve", "mejora": "improve",
        "analizar": "analyze", "analiza": "analyze", "hacer": "make", "haz": "make",
        "ayuda": "help", "ayudar": "help", "diseñar": "design", "diseña": "design",
        "generar": "generate", "genera": "generate", "imagen": "image", "código": "code",
    }),
    "fra": MappingProxyType({
        "créer": "create", "crée": "create", "écrire": "write", "écris": "write",
        "expliquer": "explain", "explique": "explain", "améliorer": "improve", "améliore": "improve",
        "analyser": "analyze", "analyse": "analyze", "faire": "make", "fais": "make",
        "aider": "help", "aide": "help", "concevoir": "design", "générer": "generate",
        "image": "image", "code": "code",
    }),
    "deu": MappingProxyType({
        "erstellen": "create", "erstelle": "create", "schreiben": "write", "schreibe": "write",
        "erklären": "explain", "erkläre": "explain", "verbessern": "improve", "verbessere": "improve",
        "analysieren": "analyze", "analysiere": "analyze", "machen": "make", "mache": "make",
        "helfen": "help", "hilf": "help", "entwerfen": "design", "generieren": "generate",
        "bild": "image",
    }),
    "por": MappingProxyType({
        "criar": "create", "crie": "create", "escrever": "write", "escreva": "write",
        "explicar": "explain", "explique": "explain", "melhorar": "improve", "melhore": "improve",
        "analisar": "analyze", "analise": "analyze", "fazer": "make", "faça": "make",
        "ajudar": "help", "ajude": "help", "projetar": "design", "gerar": "generate",
        "imagem": "image", "código": "code",
    }),
    "ita": MappingProxyType({
        "creare": "create", "crea": "create", "scrivere": "write", "scrivi": "write",
        "spiegare": "explain", "spiega": "explain", "migliorare": "improve", "migliora": "improve",
        "analizzare": "analyze", "analizza": "analyze", "fare": "make", "fai": "make",
        "aiutare": "help", "aiuta": "help", "progettare": "design", "generare": "generate",
        "immagine": "image", "codice": "code",
    }),
    "nld": MappingProxyType({
        "maken": "make", "maak": "make", "schrijven": "write", "schrijf": "write",
        "uitleggen": "explain", "leg": "explain", "verbeteren": "improve", "verbeter": "improve",
        "analyseren": "analyze", "analyseer": "analyze", "helpen": "help", "help": "help",
        "ontwerpen": "design", "genereren": "generate", "afbeelding": "image",
    }),
})

_WORD_RE = re.compile(r"\w+", re.UNICODE)


def language_name(code: str | None) -> str:
    """Display name for an ISO 639-3 code; unknown codes map to English."""
    return LANGUAGE_NAMES.get((code or "").lower(), "English")


def detect_language(text: str) -> str:
    """Best-effort ISO 639-3 code for ``text``.

    Returns ``"und"`` when the text is too short or no language reaches the
    minimum number of function-word hits. Ties resolve in favour of English,
    then in table order.
    """
    cleaned = (text or "").strip()
    if len(cleaned) < MIN_DETECT_CHARS:
        return UNDETERMINED

    tokens = [t.lower() for t in _WORD_RE.findall(cleaned)]
    best_code, best_hits = UNDETERMINED, 0
    for code, words in FUNCTION_WORDS.items():
        hits = sum(1 for t in tokens if t in words)
        if hits > best_hits:
            best_code, best_hits = code, hits

    if best_hits < MIN_HITS:
        return UNDETERMINED
    logger.debug("Detected language %s (%d hits)", best_code, best_hits)
    return best_code


def _match_case(source: str, replacement: str) -> str:
    if source[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def translate_action_words(text: str, code: str) -> str:
    """Replace known action words of language ``code`` with their English form."""
    table = ACTION_WORDS.get(code)
    if not table:
        return text

    def _sub(match: re.Match[str]) -> str:
        word = match.group(0)
        english = table.get(word.lower())
        return _match_case(word, english) if english else word

    return _WORD_RE.sub(_sub, text)
