"""Input Enhancer - ordered rule pipeline that cleans up and enriches a raw request.

Each rule is a pure ``(text, context) -> text`` transform. Rules run in a fixed
order over a single working string and may compound; a rule's label is
recorded once, the first time the rule changes the text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable

from prompt_forge.config import EnhancerConfig
from prompt_forge.engine.analyzer import analyze_input
from prompt_forge.engine.language import (
    ENGLISH,
    UNDETERMINED,
    detect_language,
    language_name,
    translate_action_words,
)
from prompt_forge.models.enhancement import EnhancementResult
from prompt_forge.models.profile import ContextFlag, Domain, InputProfile, Intent, Style

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = EnhancerConfig()

MISSPELLINGS = MappingProxyType({
    "teh": "the", "recieve": "receive", "seperate": "separate", "definately": "definitely",
    "occured": "occurred", "untill": "until", "wich": "which", "alot": "a lot",
    "becuase": "because", "adress": "address", "enviroment": "environment", "wierd": "weird",
    "thier": "their", "goverment": "government", "tommorow": "tomorrow", "accomodate": "accommodate",
    "begining": "beginning", "beleive": "believe", "calender": "calendar", "existance": "existence",
    "buisness": "business", "writting": "writing", "neccessary": "necessary", "managment": "management",
})

INFORMAL = MappingProxyType({
    "kinda": "somewhat", "sorta": "somewhat", "gonna": "going to", "wanna": "want to",
    "gotta": "have to", "u": "you", "ur": "your", "pls": "please", "plz": "please",
    "thx": "thanks", "cuz": "because", "coz": "because", "lemme": "let me",
    "gimme": "give me", "dunno": "do not know", "ya": "you",
})

CONTRACTIONS = MappingProxyType({
    "cant": "can't", "wont": "won't", "dont": "don't", "doesnt": "doesn't",
    "isnt": "isn't", "arent": "aren't", "didnt": "didn't", "couldnt": "couldn't",
    "shouldnt": "shouldn't", "wouldnt": "wouldn't", "im": "I'm", "ive": "I've",
    "youre": "you're", "theyre": "they're", "thats": "that's", "whats": "what's",
})

DOMAIN_CONTEXT = MappingProxyType({
    Domain.BUSINESS: "Consider the business objectives, target market, and measurable outcomes.",
    Domain.TECHNICAL: "Include technical specifications, constraints, and implementation details.",
    Domain.CREATIVE: "Emphasize originality, vivid imagery, and a distinctive creative voice.",
    Domain.ACADEMIC: "Maintain academic rigor with clear structure, evidence, and citations where relevant.",
    Domain.PERSONAL: "Tailor the response to personal circumstances and practical everyday use.",
    Domain.PROFESSIONAL: "Keep the response polished and appropriate for a workplace setting.",
})

STYLE_GUIDANCE = MappingProxyType({
    Style.FORMAL: "Use a formal, respectful tone throughout.",
    Style.CASUAL: "Keep the tone casual, warm, and conversational.",
    Style.CREATIVE: "Use a creative voice with imaginative language.",
    Style.TECHNICAL: "Use precise technical terminology and structured explanations.",
    Style.PERSUASIVE: "Use persuasive language with a clear call to action.",
    Style.EDUCATIONAL: "Use an educational approach that builds understanding step by step.",
})

CONTEXT_SENTENCES: tuple[tuple[ContextFlag, str], ...] = (
    (ContextFlag.TIME_SENSITIVE, "Prioritize a fast, actionable answer that fits a tight timeline."),
    (ContextFlag.TEAM_REQUEST, "Frame the output so a team can review and collaborate on it."),
    (ContextFlag.PROFESSIONAL_CONTEXT, "Meet professional quality standards suitable for stakeholders."),
)

SPECIFICITY_REQUEST = "Please be specific and include relevant details."
EXAMPLES_REQUEST = "Include practical examples to illustrate the solution."
METRICS_REQUEST = "Define the key metrics used to measure success."
FALLBACK_GUIDANCE = "Provide a thorough, well-structured response that fully addresses the request."
FALLBACK_LABEL = "Added general optimization guidance"
BULLET_LEAD = "Address the following points:"

VAGUE_PATTERN = re.compile(
    r"^(make|create|generate|write|help|fix)(?:\s+(?:it|this|something|me))?[.!?]*$",
    re.IGNORECASE | re.ASCII,
)
VAGUE_ELABORATIONS = MappingProxyType({
    "make": " something specific, describing its purpose, audience, and format",
    "create": " original content with a defined goal, audience, and style",
    "generate": " original content with a defined goal, audience, and style",
    "write": " a well-structured piece with a clear topic, tone, and length",
    "help": " me with a clearly defined task, including the relevant context and the desired outcome",
    "fix": " the described problem, explaining the root cause and the corrected solution",
})

CREATE_VERB_RE = re.compile(
    r"^(create|make|build|write|generate|design|draft|produce)\b\s*(?:(?:me|us)\s+)?(?:(?:a|an|the|some)\s+)?",
    re.IGNORECASE,
)
REQUEST_LEAD_RE = re.compile(
    r"^(?:i\s+(?:need|want)|give\s+me|get\s+me)\s+(?:(?:a|an|the|some)\s+)?",
    re.IGNORECASE,
)
INTENT_LEADS = MappingProxyType({
    Intent.EXPLAIN: (
        "Provide a clear, detailed explanation of ",
        re.compile(r"^(?:please\s+)?(?:explain|describe|tell\s+me\s+about|what\s+(?:is|are)|how\s+(?:does|do|to))\s+",
                   re.IGNORECASE),
    ),
    Intent.IMPROVE: (
        "Suggest specific improvements for ",
        re.compile(r"^(?:please\s+)?(?:improve|fix|enhance|make\s+better)\s+", re.IGNORECASE),
    ),
    Intent.ANALYZE: (
        "Provide a thorough analysis of ",
        re.compile(r"^(?:please\s+)?(?:analy[sz]e|review|evaluate|assess)\s+", re.IGNORECASE),
    ),
})
DETAIL_WORD_RE = re.compile(r"\b(?:detailed|specific)\b", re.IGNORECASE)
_WORD_CHAR_RE = re.compile(r"\w")


def _word_pattern(words) -> re.Pattern[str]:
    # Not inside a word, an apostrophe form, or a dotted abbreviation like "U.S."
    alternatives = "|".join(sorted(map(re.escape, words), key=len, reverse=True))
    return re.compile(rf"(?<![\w'.])(?:{alternatives})(?![\w'])(?!\.\w)", re.IGNORECASE)


_MISSPELLING_RE = _word_pattern(MISSPELLINGS)
_INFORMAL_RE = _word_pattern(INFORMAL)
_CONTRACTION_RE = _word_pattern(CONTRACTIONS)


@dataclass(frozen=True)
class RuleContext:
    """Read-only state shared by every rule during one enhance call."""

    original: str
    profile: InputProfile
    language: str
    config: EnhancerConfig


@dataclass(frozen=True)
class EnhancementRule:
    name: str
    apply: Callable[[str, RuleContext], str]
    label: str | None  # may reference {domain}, {style}, {language}


def _match_case(source: str, replacement: str) -> str:
    if source[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _replace_words(pattern: re.Pattern[str], table, text: str) -> str:
    # Unicode case folding lets "İ" match "i" and "ſ" match "s"; such matches have no table entry
    def _sub(match: re.Match[str]) -> str:
        word = match.group(0)
        replacement = table.get(word.lower())
        return _match_case(word, replacement) if replacement else word

    return pattern.sub(_sub, text)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:] if text[:1].islower() else text


def _lower_first(text: str) -> str:
    # Leave acronyms such as "API" alone
    if len(text) > 1 and text[1].isupper():
        return text
    return text[:1].lower() + text[1:]


def _append(text: str, sentence: str) -> str:
    if not text:
        return sentence
    if "\n" in text:
        return f"{text}\n{sentence}"
    if text.endswith("."):
        return f"{text[:-1]}. {sentence}"
    if not text.endswith(("!", "?")):
        text += "."
    return f"{text} {sentence}"


def _is_vague(text: str) -> bool:
    return VAGUE_PATTERN.match(text.strip()) is not None


# --- rules -----------------------------------------------------------------


def _capitalize(text: str, ctx: RuleContext) -> str:
    return _capitalize_first(text)


def _terminal_punctuation(text: str, ctx: RuleContext) -> str:
    if text.endswith((".", "!", "?")):
        return text
    return text.rstrip(",;: ") + "."


def _fix_spelling(text: str, ctx: RuleContext) -> str:
    return _replace_words(_MISSPELLING_RE, MISSPELLINGS, text)


def _normalize_whitespace(text: str, ctx: RuleContext) -> str:
    text = re.sub(r"[ \t]{2,}", " ", text)
    text = re.sub(r"[ \t]+([.,!?;:])", r"\1", text)
    return re.sub(r"([a-z0-9][.!?])([A-Z])", r"\1 \2", text)


def _restructure(text: str, ctx: RuleContext) -> str:
    clauses = [
        c.strip().lstrip("-*• ").rstrip(" ;")
        for c in re.split(r"[;\n]", text)
    ]
    clauses = [c for c in clauses if c.strip(" .!?")]
    if len(clauses) < 3:
        return text
    # Each bullet is a sentence of its own
    return BULLET_LEAD + "".join(
        f"\n- {c}" if c.endswith((".", "!", "?")) else f"\n- {c}."
        for c in clauses
    )


def _professional_tone(text: str, ctx: RuleContext) -> str:
    return _replace_words(_INFORMAL_RE, INFORMAL, text)


def _fix_contractions(text: str, ctx: RuleContext) -> str:
    return _replace_words(_CONTRACTION_RE, CONTRACTIONS, text)


def _expand_short_request(text: str, ctx: RuleContext) -> str:
    if len(text) >= ctx.config.short_request_chars or _is_vague(ctx.original):
        return text

    if ctx.profile.intent is Intent.CREATE:
        m = CREATE_VERB_RE.match(text)
        if m:
            lead = f"{m.group(1).capitalize()} a comprehensive "
        else:
            m = REQUEST_LEAD_RE.match(text)
            lead = "Create a comprehensive "
    else:
        lead, pattern = INTENT_LEADS[ctx.profile.intent]
        m = pattern.match(text)

    remainder = text[m.end():] if m else text
    if not remainder.strip(" .!?"):
        return text
    return lead + _lower_first(remainder)


def _domain_context(text: str, ctx: RuleContext) -> str:
    domain = ctx.profile.domain
    if domain is Domain.GENERAL or domain.value in text.lower():
        return text
    return _append(text, DOMAIN_CONTEXT[domain])


def _style_guidance(text: str, ctx: RuleContext) -> str:
    style = ctx.profile.style
    if (
        ctx.profile.confidence <= ctx.config.style_confidence_threshold
        or style not in STYLE_GUIDANCE
        or style.value in text.lower()
    ):
        return text
    return _append(text, STYLE_GUIDANCE[style])


def _context_requirements(text: str, ctx: RuleContext) -> str:
    for flag, sentence in CONTEXT_SENTENCES:
        if ctx.profile.has_flag(flag):
            text = _append(text, sentence)
    return text


def _request_specificity(text: str, ctx: RuleContext) -> str:
    if DETAIL_WORD_RE.search(text):
        return text
    return _append(text, SPECIFICITY_REQUEST)


def _expand_vague(text: str, ctx: RuleContext) -> str:
    m = VAGUE_PATTERN.match(ctx.original.strip())
    if not m:
        return text
    verb = m.group(1)
    elaborated = verb.capitalize() + VAGUE_ELABORATIONS[verb.lower()]
    head = _capitalize_first(ctx.original.strip().rstrip(".!? "))
    if text.startswith(head):
        return elaborated + text[len(head):]
    return _append(text, elaborated + ".")


def _request_examples(text: str, ctx: RuleContext) -> str:
    if ctx.profile.domain is not Domain.TECHNICAL or "example" in text.lower():
        return text
    return _append(text, EXAMPLES_REQUEST)


def _request_metrics(text: str, ctx: RuleContext) -> str:
    if ctx.profile.domain is not Domain.BUSINESS or "metric" in text.lower():
        return text
    return _append(text, METRICS_REQUEST)


def _locale_context(text: str, ctx: RuleContext) -> str:
    if ctx.language in (ENGLISH, UNDETERMINED):
        return text
    return _append(text, f"Respond in {language_name(ctx.language)}, following its regional conventions.")


SURFACE_RULES: tuple[EnhancementRule, ...] = (
    EnhancementRule("capitalize", _capitalize, "Capitalized first letter"),
    EnhancementRule("terminal_punctuation", _terminal_punctuation, "Added ending punctuation"),
)

CONTENT_RULES: tuple[EnhancementRule, ...] = (
    EnhancementRule("spelling", _fix_spelling, "Fixed spelling errors"),
    EnhancementRule("whitespace", _normalize_whitespace, "Normalized spacing and punctuation"),
    EnhancementRule("structure", _restructure, "Restructured multi-part request into bullet points"),
    EnhancementRule("professional_tone", _professional_tone, "Converted casual language to professional tone"),
    EnhancementRule("contractions", _fix_contractions, "Applied grammar and style corrections"),
    EnhancementRule("short_request", _expand_short_request, "Expanded brief request with smart context"),
    EnhancementRule("domain_context", _domain_context, "Added {domain} domain context"),
    EnhancementRule("style_guidance", _style_guidance, "Added {style} style guidance"),
    EnhancementRule("context_requirements", _context_requirements, "Added context-specific requirements"),
    EnhancementRule("specificity", _request_specificity, "Requested specific, detailed output"),
    EnhancementRule("vague_request", _expand_vague, "Expanded vague request with guidance"),
    EnhancementRule("examples", _request_examples, "Requested practical examples"),
    EnhancementRule("metrics", _request_metrics, "Requested success metrics"),
    EnhancementRule("locale", _locale_context, None),
)


def _apply_rules(
    rules: tuple[EnhancementRule, ...],
    text: str,
    ctx: RuleContext,
    improvements: list[str],
) -> str:
    for rule in rules:
        updated = rule.apply(text, ctx)
        if updated == text:
            continue
        text = updated
        if rule.label is None:
            continue
        label = rule.label.format(
            domain=ctx.profile.domain.value,
            style=ctx.profile.style.value,
            language=language_name(ctx.language),
        )
        if label not in improvements:
            improvements.append(label)
        logger.debug("Rule %s applied", rule.name)
    return text


def enhance_input(text: str, config: EnhancerConfig | None = None) -> EnhancementResult:
    """Run the enhancement pipeline over ``text``.

    Empty or whitespace-only input returns an empty result without running
    any rule. Any other input yields at least one improvement label.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        return EnhancementResult(enhanced="", improvements=[])

    if not _WORD_CHAR_RE.search(cleaned):
        # Punctuation or symbols only: nothing to rewrite
        return EnhancementResult(enhanced=FALLBACK_GUIDANCE, improvements=[FALLBACK_LABEL])

    config = config or DEFAULT_CONFIG
    improvements: list[str] = []

    code = detect_language(cleaned)
    if code not in (ENGLISH, UNDETERMINED):
        cleaned = translate_action_words(cleaned, code)
        improvements.append(f"Detected {language_name(code)} input")

    ctx = RuleContext(
        original=cleaned,
        profile=analyze_input(cleaned),
        language=code,
        config=config,
    )

    working = _apply_rules(SURFACE_RULES, cleaned, ctx, improvements)
    baseline = working
    working = _apply_rules(CONTENT_RULES, working, ctx, improvements)

    if working == baseline and not improvements:
        working = _append(working, FALLBACK_GUIDANCE)
        improvements.append(FALLBACK_LABEL)

    logger.debug("Enhanced input with %d improvements", len(improvements))
    return EnhancementResult(
        enhanced=working,
        improvements=improvements,
        language=language_name(code),
    )
