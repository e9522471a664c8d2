"""Input Analyzer - classifies a free-text request into an InputProfile."""

from __future__ import annotations

import logging
import re
import string

from prompt_forge.models.profile import (
    ContextFlag,
    Domain,
    InputProfile,
    Intent,
    Specificity,
    Style,
)

logger = logging.getLogger(__name__)

TOPIC_LENGTH = 50
MAX_KEYWORDS = 10
BASE_CONFIDENCE = 0.5

STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to",
    "for", "of", "with", "by", "about", "into", "through", "during", "before", "after",
    "above", "below", "up", "down", "out", "off", "over", "under", "again", "further",
    "then", "once", "is", "are", "was", "were", "this", "that", "these", "those",
})

# Checked in order; first match wins.
INTENT_PATTERNS: tuple[tuple[Intent, re.Pattern[str]], ...] = (
    (Intent.EXPLAIN, re.compile(r"\b(explain\w*|how|what)\b", re.IGNORECASE)),
    (Intent.IMPROVE, re.compile(r"\b(improv\w*|fix\w*|better)\b", re.IGNORECASE)),
    (Intent.ANALYZE, re.compile(r"\b(analy[sz]\w*|review\w*)\b", re.IGNORECASE)),
)

DOMAIN_PATTERNS: tuple[tuple[Domain, re.Pattern[str]], ...] = (
    (Domain.BUSINESS, re.compile(
        r"\b(business|marketing|sales|revenue|startup|strategy|customers?|brand|market)\b", re.IGNORECASE)),
    (Domain.TECHNICAL, re.compile(
        r"\b(code|software|api|database|algorithm|programming|app|system|technical|server)\b", re.IGNORECASE)),
    (Domain.CREATIVE, re.compile(
        r"\b(story|poem|art|design|creative|novel|music|painting|lyrics)\b", re.IGNORECASE)),
    (Domain.ACADEMIC, re.compile(
        r"\b(research|thesis|essay|study|academic|paper|university|homework)\b", re.IGNORECASE)),
    (Domain.PERSONAL, re.compile(
        r"\b(my|personal|family|friends?|hobby|life|birthday)\b", re.IGNORECASE)),
    (Domain.PROFESSIONAL, re.compile(
        r"\b(resume|career|job|interview|meeting|report|presentation|professional)\b", re.IGNORECASE)),
)

STYLE_PATTERNS: tuple[tuple[Style, re.Pattern[str]], ...] = (
    (Style.FORMAL, re.compile(r"\b(formal|official|polite|respectful)\b", re.IGNORECASE)),
    (Style.CASUAL, re.compile(r"\b(casual|friendly|fun|relaxed|chill)\b", re.IGNORECASE)),
    (Style.CREATIVE, re.compile(r"\b(creative|imaginative|artistic|unique|original)\b", re.IGNORECASE)),
    (Style.TECHNICAL, re.compile(r"\b(technical|precise|specification|architecture)\b", re.IGNORECASE)),
    (Style.PERSUASIVE, re.compile(r"\b(persuasive|convince|sell|pitch|compelling)\b", re.IGNORECASE)),
    (Style.EDUCATIONAL, re.compile(r"\b(teach|learn|tutorial|guide|lesson|students?)\b", re.IGNORECASE)),
)

DETAIL_PATTERN = re.compile(r"specific|detailed", re.IGNORECASE)

CONTEXT_PATTERNS: tuple[tuple[ContextFlag, re.Pattern[str]], ...] = (
    (ContextFlag.TIME_SENSITIVE, re.compile(
        r"\b(urgent\w*|asap|quickly|deadline|today|immediately)\b", re.IGNORECASE)),
    (ContextFlag.TEAM_REQUEST, re.compile(
        r"\b(team|we|our|colleagues|collaborat\w*)\b", re.IGNORECASE)),
    (ContextFlag.PROFESSIONAL_CONTEXT, re.compile(
        r"\b(clients?|company|stakeholders?|executives?|professional)\b", re.IGNORECASE)),
)
EXPANSION_THRESHOLD = 30


def _first_match(patterns, text: str, default):
    for value, pattern in patterns:
        if pattern.search(text):
            return value, True
    return default, False


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Return up to ``limit`` non-stop-words longer than 2 chars, in input order."""
    keywords: list[str] = []
    for token in text.split():
        word = token.strip(string.punctuation)
        if len(word) > 2 and word.lower() not in STOP_WORDS:
            keywords.append(word)
            if len(keywords) == limit:
                break
    return keywords


def classify_specificity(word_count: int) -> Specificity:
    if word_count > 20:
        return Specificity.DETAILED
    if word_count > 8:
        return Specificity.MODERATE
    return Specificity.VAGUE


def analyze_input(text: str) -> InputProfile:
    """Classify a raw request. Never raises; empty input yields the default profile."""
    cleaned = (text or "").strip()
    if not cleaned:
        return InputProfile()

    intent, intent_matched = _first_match(INTENT_PATTERNS, cleaned, Intent.CREATE)
    domain, domain_matched = _first_match(DOMAIN_PATTERNS, cleaned, Domain.GENERAL)
    style, _ = _first_match(STYLE_PATTERNS, cleaned, Style.PROFESSIONAL)

    confidence = BASE_CONFIDENCE
    if len(cleaned) > 50:
        confidence += 0.2
    if DETAIL_PATTERN.search(cleaned):
        confidence += 0.1
    if intent_matched:
        confidence += 0.1
    if domain_matched:
        confidence += 0.1

    context = {flag for flag, pattern in CONTEXT_PATTERNS if pattern.search(cleaned)}
    if len(cleaned) < EXPANSION_THRESHOLD:
        context.add(ContextFlag.NEEDS_EXPANSION)

    profile = InputProfile(
        topic=cleaned[:TOPIC_LENGTH] + ("..." if len(cleaned) > TOPIC_LENGTH else ""),
        intent=intent,
        specificity=classify_specificity(len(cleaned.split())),
        keywords=extract_keywords(cleaned),
        domain=domain,
        style=style,
        confidence=min(1.0, round(confidence, 2)),
        context=frozenset(context),
    )
    logger.debug(
        "Analyzed input: intent=%s specificity=%s domain=%s style=%s confidence=%.2f",
        profile.intent.value,
        profile.specificity.value,
        profile.domain.value,
        profile.style.value,
        profile.confidence,
    )
    return profile
